# serialtui

A full-screen terminal program for watching and talking to a serial port.
Received data scrolls by in a timestamped view, and typed lines are sent with
a configurable line ending. Sent commands are kept in a history that is saved
when the program exits and loaded again at the next start.

## Installing

```
pip install .
```

## Running

```
serialtui
```

Open a port directly, optionally with a baud rate (115200 by default):

```
serialtui /dev/ttyUSB0 9600
```

Print the version and exit:

```
serialtui --version
```

Quit with `C-c`.

## Keys

`Esc` returns to view mode from any other mode.

In view mode:

| Key   | Action                             |
|-------|------------------------------------|
| `?`   | toggle the help menu               |
| `p`   | pause or resume reading the port   |
| `k`   | scroll up                          |
| `j`   | scroll down                        |
| `K`   | scroll up 5                        |
| `J`   | scroll down 5                      |
| `:`   | enter send mode                    |
| `C-e` | port configuration                 |
| `C-t` | toggle timestamps                  |
| `C-o` | clear the received view            |

In send mode:

| Key         | Action                                   |
|-------------|------------------------------------------|
| `Enter`     | send the typed line with the line ending |
| `Backspace` | delete the last typed character          |
| `Up`        | open the send history                    |
| `C-b`       | send a break                             |
| `C-k`       | toggle touch-type mode                   |
| `C-u`       | toggle upper case on send                |
| `C-l`       | cycle line ending (CRLF, LF, CR, NONE)   |

In touch-type mode every typed character is sent at once, and `Enter` sends
only the line ending.

In the send history, `Up`/`k` and `Down`/`j` move the selection, `d` removes
the selected command, `e` puts it into the input line for editing and `Enter`
sends it straight away.

In port configuration, `Tab` switches between the port and baud-rate fields,
`Up`/`k` and `Down`/`j` change the value, and `Enter` opens the selected port.
If the port cannot be opened, the reason is shown in red in the status line.

The history is stored as `history.txt` in the user's roaming application data
directory, under `tui-serial` (see `serialtui.paths.history_file()`).

## Using the pieces

The building blocks can be used on their own.

Splitting received bytes into display rows:

```python
from serialtui.ascii_view import AsciiView

view = AsciiView(max_rows=1024)
view.parse_bytes(b"hello\nworld\n", width=80)
for row in view.rows:
    print(row.label, repr(row.text))
```

Preparing text to send:

```python
from serialtui.send_view import SendView

send = SendView()
send.set_input("at")
send.toggle_upper_on_send()
print(repr(send.take_input()))  # 'AT\r\n'
```

Talking to a port:

```python
from serialtui.port import SerialPort, SerialPortError, enumerate_ports

print(enumerate_ports())
with SerialPort() as port:
    try:
        port.open("/dev/ttyUSB0", 115200)
    except SerialPortError as exc:
        print(exc.kind)
    else:
        port.send("hello\r\n")
        port.read()
        print(port.take_bytes())
```

`serialtui.history.CommandHistory` keeps unique commands with a selection
cursor, and `serialtui.config_view.ConfigView` holds the port and baud-rate
choices and applies them to a `SerialPort`.

## What it does not do

- The configuration screen offers only the port and the baud rate. Data bits,
  stop bits and parity can be set on a `SerialPort` in code (`data_bits`,
  `stop_bits`, `parity`), but not from the screen.
- The help menu lists `C-p` ("pause no flush"); that key does nothing.
- Received data is kept only in memory, up to 1024 rows; it is not logged to
  a file.