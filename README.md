# minitalk

A small messaging pair for POSIX systems. The server waits for signals, and
the client sends it a text message one bit at a time. `SIGUSR1` carries a 1
bit and `SIGUSR2` carries a 0 bit. Bits go most significant first, and a NUL
byte ends each message.

## Installation

```
pip install .
```

The server waits with `signal.sigwaitinfo`. That call exists on Linux but
not on macOS or Windows, so the server runs on Linux only. The client needs
`os.kill` with `SIGUSR1` and `SIGUSR2`.

## Usage

Start the server in one terminal:

```
minitalk-server
```

It prints a banner, then its process id (`PID : <pid>`), then waits for
signals. Each byte is written to standard output as soon as all eight of its
bits have arrived. If a bit comes from a different sender than the previous
one, the partly built byte is dropped and the server starts a new byte. The
server takes no arguments. If it is given any, it prints the banner and exits
with status 1. Ctrl-C stops it with exit status 130.

From a second terminal, send a message:

```
minitalk-client <pid> "hello there"
```

The client sends the message as UTF-8 and adds a terminating zero byte. It
waits 0.5 ms after each signal. It prints an error on standard error and
exits with status 1 in these cases:

- the wrong number of arguments, or an empty message
  (`Invalid arguments! Usage: ./client <pid> <message>`);
- a PID holding anything other than digits, apart from one leading `+`
  (`Invalid PID!`);
- a PID outside 100–99999 (`Invalid PID range!`);
- a signal that cannot be delivered (`Error sending SIGUSR1` or
  `Error sending SIGUSR2`).

Both commands can also be run as `python -m minitalk.server` and
`python -m minitalk.client`.

## Library use

### Bit protocol

`minitalk.protocol` works without signals. `byte_bits(byte)` yields the eight
bits of a byte, most significant first. `encode_message(message)` yields the
bits of a `str` (encoded as UTF-8) or of `bytes`, followed by a zero byte.
`BitDecoder` puts the bytes back together:

```python
from minitalk.protocol import BitDecoder, encode_message

decoder = BitDecoder()
received = bytearray()
for bit in encode_message(b"hi"):
    byte = decoder.feed(sender=1234, bit=bit)
    if byte is not None:
        received.append(byte)
# received == b"hi\x00"
```

`BitDecoder.reset()` drops a partly received byte. The module also defines
`PID_MIN` (100) and `PID_MAX_LIMIT` (99999).

### Client

`minitalk.client` provides these functions:

- `validate_args(args)` checks a `<pid> <message>` pair.
- `parse_pid(text)` parses and range-checks a PID.
- `send_byte(pid, byte, delay, kill)` sends a single byte.
- `send_message(pid, message, delay, kill)` sends a whole message with its
  terminating zero byte.

All of them raise `ClientError` on failure. `kill` defaults to `os.kill`. Any
callable taking `(pid, signum)` can stand in for it, for example to record
the signals instead of sending them.

### Server

`minitalk.server.Server(output)` writes the decoded bytes to a binary stream.
The default stream is `sys.stdout.buffer`. `Server.handle(signum, sender)`
takes one signal and returns the byte once it is complete. `Server.serve()`
blocks `SIGUSR1` and `SIGUSR2` and handles them in a loop, and runs until it
is interrupted. `banner()` returns the start-up banner text.

### Formatting

`minitalk.ftprintf` provides a small formatter. It supports the
`%c %s %p %d %i %u %x %X %%` conversions:

```python
from minitalk.ftprintf import render

render("PID : %d \n", 4242)   # 'PID : 4242 \n'
```

`%d` and `%i` wrap values to a signed 32-bit integer. `%u`, `%x` and `%X`
wrap them to an unsigned 32-bit integer. `%s` prints `(null)` for `None`.
`%p` prints `0x0` for a zero or `None` address. An unknown conversion prints
its character, and a lone `%` at the end of the format is dropped. Each
conversion is also available as a function: `format_str`, `format_nbr`,
`format_u_nbr`, `format_x_nbr` and `format_ptr`. `printf(fmt, *args,
stream=None)` writes the result to standard output, or to `stream` if one is
given, and returns the number of UTF-8 bytes written.

## Limitations

- Delivery is not acknowledged. The client cannot tell whether the server
  received the message, and bits can be lost if signals arrive faster than
  the server handles them.
- The server does not keep messages. It writes each byte as it arrives, and
  does not separate or record messages from different clients.

## Tests

```
pip install ".[test]"
pytest
```