import docker  # type: ignore

_clients: dict[int, "docker.DockerClient"] = {}


def get_client(timeout: int = 10):
    """
    Клиент Docker создаётся при первом обращении, а не при импорте модуля.
    timeout - ожидание ответа Docker API в секундах, в том числе exec.
    """
    if timeout not in _clients:
        _clients[timeout] = docker.from_env(timeout=timeout)
    return _clients[timeout]


def exec_in_container(container_name: str, command: list[str], timeout: int = 10) -> str:
    """
    Выполнить команду внутри Docker-контейнера и вернуть stdout.
    Вывод не в UTF-8 даёт UnicodeDecodeError, байты не выбрасываются молча.
    """
    container = get_client(timeout).containers.get(container_name)

    exit_code, (stdout, stderr) = container.exec_run(command, tty=False, demux=True)
    if exit_code != 0:
        raise RuntimeError((stderr or b"").decode("utf-8", errors="replace").strip())

    return (stdout or b"").decode("utf-8")
