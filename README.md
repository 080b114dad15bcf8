# minitalk

Two small command-line programs that pass a message from one process to
another using only the POSIX signals `SIGUSR1` and `SIGUSR2`. Each byte is
sent as eight bits, most significant bit first: `SIGUSR1` stands for a 1 and
`SIGUSR2` for a 0. The server acknowledges every bit with `SIGUSR1`, and when
the trailing NUL byte arrives it first sends `SIGUSR2` to tell the client
that the whole message was received.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for messages, writing every received byte, the terminating NUL included, to
standard output. It runs until it is interrupted:

```
minitalk-server
Server PID: 4242
```

From another terminal, send a message to that process id:

```
minitalk-client 4242 "Hello there"
```

The message is sent as the bytes of the command-line argument, followed by a
NUL byte. When the server has the whole message, the client prints
`Message Recieved By Server.` on standard error.

### Errors

Both commands exit with status 1 and print an `ERROR!` line and a message on
standard error when they cannot go on. The client does so when:

- it is not given exactly two arguments (`Usage: ./client <PID> <MESSAGE>`);
- the process id contains anything other than digits
  (`Invalid PID - Contains Invalid Characters`);
- no process with that id exists (`PID Does Not Exist`);
- the server does not acknowledge a bit within five seconds
  (`TIMEOUT - Server Didn't Respond`). After three seconds of waiting it
  shows on standard output how many seconds it has been waiting.

The server reports `Error Setting Up Signal Handler` when it cannot block and
wait for the two signals.

## Library use

- `minitalk.bits`: `byte_bits(byte)` gives the eight bits of a byte, most
  significant first; `message_bytes(message)` encodes text as UTF-8 and
  appends the NUL terminator, refusing messages that already hold a NUL;
  `BitAssembler.push(bit)` collects bits and returns each completed byte.
- `minitalk.server`: `Receiver(output).receive(signum, sender)` takes one
  signal, writes any completed byte to `output` and acknowledges the sender;
  `serve(output)` prints the PID and runs the receiving loop forever.
- `minitalk.client`: `Sender(pid, timeout=5.0, poll_interval=0.0001)` installs
  the acknowledgement handlers; `send_byte(byte)` and `send(message)` send
  data and raise `MinitalkError` on timeout.
- `minitalk.errors`: `ErrorKind`, `MinitalkError` (with its `kind`),
  `error_message(kind)`, and the process-id checks `validate_pid(text)`,
  `check_pid_exists(pid)` and `check(pid, text)`.

The package also carries some general helpers:

- `minitalk.chars`: ASCII `isalnum`, `isalpha`, `isascii`, `isdigit`,
  `isprint`, `toupper` and `tolower`, taking an integer code or a
  one-character string.
- `minitalk.numbers`: `atoi(text)` parses a leading decimal integer and
  `itoa(n)` formats one.
- `minitalk.strings`: `split`, `substr`, `strtrim`, `strnstr`, `strncmp`,
  `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strjoin`, `strmapi`,
  `striteri`, `memchr` and `memcmp`; searches return a position or `None`.
- `minitalk.printf`: `format_message(fmt, *args)` expands `%c %s %d %i %u %x
  %X %p` and `%%` with 32-bit integer rules; `print_formatted` and
  `write_number` write to a stream (standard output by default) and return
  the number of characters written.
- `minitalk.lines`: `LineReader(fd, buffer_size=10)` reads a file descriptor
  in chunks and returns lines as bytes through `read_line()` or iteration.

## Limitations

- POSIX only. The server waits with `signal.sigwaitinfo`, which Python does
  not offer on every POSIX system (macOS, for one); there the server stops
  with the signal set-up error.
- Only one client should talk to the server at a time: bits from clients
  sending at once are mixed into the same bytes.
- Messages are written to standard output as raw bytes; the server keeps no
  record of them and does not separate one message from the next except by
  the NUL byte it writes.

## Tests

```
pip install ".[test]"
pytest
```