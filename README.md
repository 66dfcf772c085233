# sigtalk

sigtalk carries short text messages from one process to another using only
POSIX signals. Every byte travels as eight signals, most significant bit
first. `SIGUSR1` stands for a 0 bit and `SIGUSR2` stands for a 1 bit. The
server puts the bits back together and writes each finished byte to standard
output.

It needs a POSIX system, because Windows has no `SIGUSR1` or `SIGUSR2`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits:

```
$ sigtalk-server
pid :12345
```

From another terminal, send a message to that pid:

```
$ sigtalk-client 12345 "hello there"
```

The server prints `hello there` and then a newline. The client always adds a
newline to the end of the message. The message is sent as the raw bytes of
the argument.

The client takes exactly two arguments, the pid and the message. The pid is
read from the leading integer of the first argument. Leading whitespace and
one sign are allowed, and parsing stops at the first non-digit. With any other
number of arguments the client prints `Arguments Error`. When no process with
that pid can be signalled it prints `Pid Error`. Both errors exit with
status 1.

The server runs until it is interrupted. Ctrl-C ends it with status 0. If it
fails to set up its signal handling, it prints `Signal Error` and exits with
status 1.

## Library use

`sigtalk.protocol` holds the encoding and has no side effects:

```python
from sigtalk.protocol import encode_message, decode, Decoder

bits = encode_message(b"hi")          # bits for b"hi\n"
assert decode(bits) == b"hi\n"

decoder = Decoder()
for bit in bits:
    byte = decoder.feed(bit)
    if byte is not None:
        print(chr(byte))
```

- `encode_byte(value)` returns the eight bits of a byte, most significant bit first.
- `encode_message(message)` returns the bits of the message followed by a newline. Text is encoded as UTF-8.
- `decode(bits)` returns the complete bytes in a bit stream. Trailing partial bits are ignored.
- `Decoder.feed(bit)` returns the finished byte after every eighth bit and `None` otherwise. `Decoder.reset()` drops a partly received byte. `Decoder.pending` gives the number of bits received towards the current byte.

`sigtalk.client`:

- `send_message(pid, message, bit_delay, byte_delay)` sends a message from Python code. The delays are in seconds and default to 100 µs after each bit and a further 200 µs after each byte.
- `check_pid(pid)` raises `ClientError` when `pid` cannot be signalled.
- `parse_pid(text)` reads a pid in the same way as the command.

`sigtalk.server.Server(output)` writes the received bytes to any binary stream. The default is standard output.

- `handle(signum, frame)` is the signal handler.
- `install()` routes `SIGUSR1` and `SIGUSR2` to the server.
- `banner(pid)` writes the `pid :N` line.
- `run()` does all of the above and then waits forever.

Two small helper modules come with the package:

- `sigtalk.chars` provides `atoi`, `itoa` and the ASCII tests and mappings `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and `tolower`.
- `sigtalk.textutil` provides string functions with C-library style results: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`, `strjoin` and `strmapi`.

## What it does not do

There is no acknowledgement from the server and no error checking on the wire.
Signals that arrive too fast can be lost or merged, and a lost bit shifts every
byte after it. The fixed delays are the only pacing. The server does not tell
one sender from another, so messages from two clients sending at once get
interleaved.

## Development

```
pip install -e ".[test]"
pytest
```