from .models import InterfaceMap, LocalPeer, Peer, RemotePeer
from .timer import Timer

# максимальное время с последнего handshake - 15 минут
MAX_HANDSHAKE = 900
IP_NOT_FOUND = "IP_NOT_FOUND"

ALIVE = "✅"
STALE = "❌"


def elapsed_since(now: int, latest_handshake: int) -> int:
    # handshake "из будущего" (рассинхрон часов) считается только что прошедшим
    return max(now - latest_handshake, 0)


def render_local(peer: LocalPeer) -> str:
    # приватный ключ в чат не выводим
    return f"Local:\n\t\tPublic key: {peer.public_key}\n\t\tPort: {peer.local_port}"


def render_remote(peer: RemotePeer, now: int, max_handshake: int = MAX_HANDSHAKE) -> str:
    elapsed = elapsed_since(now, peer.latest_handshake)
    status = ALIVE if elapsed < max_handshake else STALE
    remote_ip = peer.remote_address if peer.remote_address is not None else IP_NOT_FOUND

    return (
        f"Remote:\n"
        f"\t\tIP: {remote_ip}\n"
        f"\t\tSend bytes: {peer.sent_bytes}\n"
        f"\t\tReceived bytes: {peer.received_bytes}\n"
        f"\t\tLatest handshake: {elapsed}s {status}"
    )


def render_peer(peer: Peer, now: int, max_handshake: int = MAX_HANDSHAKE) -> str:
    if isinstance(peer, LocalPeer):
        return render_local(peer)
    return render_remote(peer, now, max_handshake)


def render_status(
    interfaces: InterfaceMap,
    timer: Timer,
    max_handshake: int = MAX_HANDSHAKE,
) -> str:
    """
    Текстовый статус для всех интерфейсов: заголовок "Interface: <имя>",
    затем по блоку на каждый пир. Пир считается живым, если handshake был
    меньше max_handshake секунд назад.

    Блоки интерфейсов разделены одним переводом строки, в конце его нет.
    """
    if not interfaces:
        return ""

    # часы нужны только для удалённых пиров
    has_remote = any(isinstance(peer, RemotePeer) for peers in interfaces.values() for peer in peers)
    now = timer.seconds_since_epoch() if has_remote else 0

    blocks = []
    for interface, peers in interfaces.items():
        body = "\n".join(f"\t{render_peer(peer, now, max_handshake)}" for peer in peers)
        blocks.append(f"Interface: {interface}\nEndpoints:\n{body}")

    return "\n".join(blocks)
