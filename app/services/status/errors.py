class WgStatusError(Exception):
    """Базовая ошибка сервиса статуса WireGuard."""


class ParseDumpError(WgStatusError):
    """Ошибка разбора вывода `wg show all dump`."""


class NoInterfacesProvided(ParseDumpError):
    def __init__(self):
        super().__init__("No interfaces found in dump line")


class InvalidEndpoint(ParseDumpError):
    def __init__(self, line: str):
        self.line = line
        super().__init__(f"the data for line `{line}` cannot be encoded to an endpoint")


class InvalidEndpointParameter(ParseDumpError):
    def __init__(self, name: str, error: str):
        self.name = name
        self.error = error
        super().__init__(f"Error parsing parameter `{name}`, err: `{error}`")


class ClockError(WgStatusError):
    """Не удалось получить текущее время."""


class DumpCommandError(WgStatusError):
    """Команда `wg show all dump` завершилась с ошибкой."""
