# potprobe

`potprobe` connects to an SSH service and works through a set of
checks to estimate how likely the service is to be a honeypot. Each
check gives a short description and a score from 0 to 100. The final
probability is the mean of all the scores.

The checks, in the order they run:

- **DELAY**: how long the TCP connection takes to open.
- **BANNER**: the server's identification line, compared with known
  honeypot signatures, old OpenSSH versions and suspicious words.
- **TRASH SEND**: how the server answers a series of malformed payloads
  sent over one connection; the worst reply is reported.
- **INVALID COMMAND**: how the server answers one randomly chosen
  malformed protocol message.
- **UNEXPECTED DISCONNECT**: whether the server still answers, and still
  sends a banner, after a disconnect and a reconnect.
- **COMMAND "HELP" CHECK**: how the server answers a `help` packet sent
  after a client header.
- **NONE AUTH**: how the server handles a bare user-authentication request.
- **PROTOCOL PROBE**: whether the server accepts a legacy `SSH-1.99` client.

Several checks wait for a random time before they start, so a full run
can take a minute or more.

## Installation

```
pip install .
```

No third-party libraries are needed at runtime.

## Command line

```
potprobe [host[:port]]
```

Give the target as an argument, or leave it out and the program asks for
it. When no port is given, port 22 is used. The address must resolve and
the port must be a number up to 65535 or a known service name. The
program then checks that the server accepts a TCP connection, runs every
check and prints a report:

```
Results
DELAY - 📶 Fast response: 12.34 ms | 10% the probability that this honeypot
BANNER - 📜 SSH Banner (no clear honeypot indicators): SSH-2.0-OpenSSH_9.6 | 10% the probability that this honeypot
...
-------------------------------------
Final Honeypot Probability: 18%
```

The exit status is 0 after a report and 1 when the address is invalid or
the server cannot be reached.

## Library use

```python
from potprobe.checks import run_checks
from potprobe.scoring import to_result, calculate_overall_probability, print_report

results = [to_result(check) for check in run_checks("192.0.2.10:22")]
print_report(results, calculate_overall_probability(results))
```

`run_checks` returns a list of `potprobe.probe.CheckResult` (name,
details, score). `potprobe.scoring.format_report` returns the report as
text instead of printing it, and `potprobe.cli.validate_address`
normalises and checks a target, raising `AddressError` on bad input.

Each check can also be called on its own and returns a
`(details, score)` pair, for example `potprobe.banner.check_banner`,
`potprobe.delay.run_delay_check`, `potprobe.trash.check_trash`,
`potprobe.invalid_command.check_invalid_command`,
`potprobe.disconnect.check_disconnect`, `potprobe.helpcheck.check_help`,
`potprobe.none_auth.check_none_auth` and
`potprobe.protocol_version.check_protocol_version`.

The grading is kept apart from the network code, so it can be used on
data you already have: `classify_banner`, `classify_delay`,
`classify_disconnect`, `analyze_help_response`,
`analyze_invalid_command_response`, `analyze_none_auth_response`,
`analyze_protocol_response` and `potprobe.trash.analyze_response`
(which returns `(score, message)`).

Only probe hosts you are allowed to test.

## Tests

```
pip install ".[test]"
pytest
```