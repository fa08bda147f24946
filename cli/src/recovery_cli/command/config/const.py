MESSAGE_INFO_CONFIG = (
    "[bold blue]Name:[/bold blue] {}\n"
    "[bold blue]Description:[/bold blue] {}\n"
    "[bold blue]Max attempts:[/bold blue] {}\n"
    "[bold blue]Base delay:[/bold blue] {}s\n"
    "[bold blue]Max delay:[/bold blue] {}s\n"
    "[bold blue]Backoff multiplier:[/bold blue] {}\n"
    "[bold blue]Jitter:[/bold blue] {}\n"
    "[bold blue]Resources:[/bold blue] {}\n"
    "[bold blue]Dependencies:[/bold blue] {}\n"
)
