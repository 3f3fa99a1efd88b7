import io
import signal

from minitalk.protocol import encode_message
from minitalk.server import Server, banner, main


def _signal_for(bit):
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def test_server_writes_message_and_terminator():
    out = io.BytesIO()
    server = Server(output=out)
    for bit in encode_message("bonjour"):
        server.handle(_signal_for(bit), 4242)
    assert out.getvalue() == b"bonjour\0"


def test_handle_returns_completed_byte():
    server = Server(output=io.BytesIO())
    results = [server.handle(_signal_for(bit), 1) for bit in encode_message("Z")]
    assert [r for r in results if r is not None] == [ord("Z"), 0]


def test_sender_change_discards_partial_byte():
    out = io.BytesIO()
    server = Server(output=out)
    for _ in range(4):
        server.handle(signal.SIGUSR1, 111)
    for bit in encode_message("ok"):
        server.handle(_signal_for(bit), 222)
    assert out.getvalue() == b"ok\0"


def test_interleaved_complete_messages():
    out = io.BytesIO()
    server = Server(output=out)
    for bit in encode_message("a"):
        server.handle(_signal_for(bit), 111)
    for bit in encode_message("b"):
        server.handle(_signal_for(bit), 222)
    assert out.getvalue() == b"a\0b\0"


def test_banner_tag_line():
    text = banner()
    assert "1 3 3 7" in text
    assert text.startswith("\n\n")


def test_main_with_arguments_fails(capsys):
    assert main(["extra"]) == 1
    assert "1 3 3 7" in capsys.readouterr().out