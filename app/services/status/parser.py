import ipaddress
import re

from .errors import (
    InvalidEndpoint,
    InvalidEndpointParameter,
    NoInterfacesProvided,
)
from .models import U16_MAX, U64_MAX, U128_MAX, InterfaceMap, LocalPeer, Peer, RemotePeer

EMPTY = "(none)"
NOT_KEEP_ALIVE = "off"

LOCAL_FIELDS = 5
REMOTE_FIELDS = 9

_DIGITS = re.compile(r"[0-9]+")

# wg печатает link-local IPv6 как [fe80::1%eth0]:port, такой адрес
# не разбирается как socket address, поэтому zone id вырезается.
# https://github.com/MindFlavor/prometheus_wireguard_exporter/issues/10
_ZONED_IPV6 = re.compile(r"\[(?P<ip>[A-Fa-f0-9:]+)%(.*)\]:(?P<port>[0-9]+)")


def _to_optional(value: str) -> str | None:
    return None if value == EMPTY else value


def _keep_alive(value: str) -> bool:
    return value != NOT_KEEP_ALIVE


def _parse_unsigned(name: str, value: str, maximum: int) -> int:
    """
    Строгий разбор беззнакового целого: только ASCII-цифры и необязательный '+'.
    """
    if not value:
        raise InvalidEndpointParameter(name, "cannot parse integer from empty string")

    digits = value[1:] if value.startswith("+") else value
    if not _DIGITS.fullmatch(digits):
        raise InvalidEndpointParameter(name, "invalid digit found in string")

    # длинную строку не отдаём в int(): у CPython есть лимит на число цифр
    if len(digits.lstrip("0")) > len(str(maximum)):
        raise InvalidEndpointParameter(name, "number too large to fit in target type")

    number = int(digits)
    if number > maximum:
        raise InvalidEndpointParameter(name, "number too large to fit in target type")
    return number


def repair_endpoint(value: str) -> str:
    """
    [ip%zone]:port -> [ip]:port, остальные значения возвращаются без изменений.
    """
    match = _ZONED_IPV6.fullmatch(value)
    if not match:
        return value
    return f"[{match.group('ip')}]:{match.group('port')}"


def parse_socket_address(value: str) -> tuple[str, int]:
    """
    Разбирает "1.2.3.4:51820" или "[2001:db8::1]:51820" в (ip, port).
    """
    invalid = InvalidEndpointParameter("remote_address", "invalid socket address syntax")

    if value.startswith("["):
        host, sep, port = value[1:].partition("]:")
        if not sep or "%" in host:
            raise invalid
        parse_ip = ipaddress.IPv6Address
    else:
        host, sep, port = value.rpartition(":")
        if not sep:
            raise invalid
        parse_ip = ipaddress.IPv4Address

    if not _DIGITS.fullmatch(port) or len(port.lstrip("0")) > 5 or int(port) > U16_MAX:
        raise invalid

    try:
        ip = parse_ip(host)
    except ValueError:
        raise invalid from None

    return str(ip), int(port)


def _parse_local(fields: list[str]) -> LocalPeer:
    return LocalPeer(
        public_key=fields[1],
        private_key=fields[2],
        local_port=_parse_unsigned("local_port", fields[3], U16_MAX),
        persistent_keepalive=_keep_alive(fields[4]),
    )


def _parse_remote(fields: list[str]) -> RemotePeer:
    remote_address, remote_port = None, None

    endpoint = _to_optional(fields[3])
    if endpoint is not None:
        remote_address, remote_port = parse_socket_address(repair_endpoint(endpoint))

    return RemotePeer(
        public_key=fields[1],
        remote_address=remote_address,
        remote_port=remote_port,
        allowed_ips=fields[4],
        latest_handshake=_parse_unsigned("latest_handshake", fields[5], U64_MAX),
        received_bytes=_parse_unsigned("received_bytes", fields[6], U128_MAX),
        sent_bytes=_parse_unsigned("sent_bytes", fields[7], U128_MAX),
        persistent_keepalive=_keep_alive(fields[8]),
    )


def parse_endpoint(fields: list[str]) -> Peer:
    """
    Тип записи определяется только количеством полей: 5 - локальный
    интерфейс, 9 - удалённый пир.
    """
    if len(fields) == LOCAL_FIELDS:
        return _parse_local(fields)
    if len(fields) == REMOTE_FIELDS:
        return _parse_remote(fields)
    raise InvalidEndpoint("\t".join(fields))


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_dump(text: str) -> InterfaceMap:
    """
    Разбирает вывод `wg show all dump` в {интерфейс: [пиры]}.

    Порядок интерфейсов и пиров сохраняется. Первая же ошибка прерывает разбор.
    """
    if not text:
        raise NoInterfacesProvided()

    interfaces: InterfaceMap = {}
    for line in _lines(text):
        # повторяющиеся табы дают пустые поля, они не считаются
        fields = [field for field in line.split("\t") if field]
        peer = parse_endpoint(fields)
        interfaces.setdefault(fields[0], []).append(peer)

    return interfaces
