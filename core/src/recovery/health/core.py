"""Проверка доступности критичных зависимостей."""

from collections.abc import Mapping

from recovery.enums import LogCategory
from recovery.health.interfaces import HealthCheck, HealthReport
from recovery.logger import RecoveryLogger, resolve_logger
from recovery.retry_politic import HEALTH_CHECK_POLICY, RetryPolicy, with_retry


async def validate_dependencies(
    dependencies: Mapping[str, HealthCheck],
    logger: RecoveryLogger | None = None,
    policy: RetryPolicy = HEALTH_CHECK_POLICY,
) -> HealthReport:
    """
    Проверяет зависимости по очереди с сокращённым числом попыток.

    Args:
        dependencies: Имя зависимости -> асинхронная проверка
        logger: Логгер (по умолчанию StructuredLogger)
        policy: Политика повторов для проверок

    Returns:
        Отчёт: healthy и список проблем по каждой зависимости
    """
    logger = resolve_logger(logger)
    issues: list[str] = []

    for name, health_check in dependencies.items():
        try:
            is_healthy = await with_retry(health_check, logger, policy)
        except Exception as e:
            issues.append(
                f"Dependency {name} failed health check: "
                f"{type(e).__name__}: {e}"
            )
            continue

        if not is_healthy:
            issues.append(f"Dependency {name} is unhealthy")

    healthy = not issues
    if not healthy:
        logger.error(
            "Dependency validation failed",
            LogCategory.ERROR_RECOVERY,
            {"issues": issues},
        )

    return HealthReport(healthy=healthy, issues=issues)
