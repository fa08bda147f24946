pytest_plugins = (
    "tests.fixtures.interfaces",
    "tests.fixtures.logger",
)
