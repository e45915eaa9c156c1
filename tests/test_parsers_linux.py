"""Tests for the ss / netstat parsers and the Linux line dispatcher."""

import pytest

from remoteports.parsers.linux import is_header_line, parse_linux_output
from remoteports.parsers.netstat import parse_netstat_line
from remoteports.parsers.ss import parse_ss_line

SS_OUTPUT = """\
State  Recv-Q Send-Q Local Address:Port  Peer Address:Port Process
LISTEN 0      4096       127.0.0.1:3000       0.0.0.0:*    users:(("node",pid=1234,fd=19))
LISTEN 0      128          0.0.0.0:22         0.0.0.0:*    users:(("sshd",pid=801,fd=3))
LISTEN 0      4096   127.0.0.53%lo:53         0.0.0.0:*    users:(("systemd-resolve",pid=640,fd=14))
LISTEN 0      128             [::]:22            [::]:*    users:(("sshd",pid=801,fd=4))
LISTEN 0      511                *:80               *:*
LISTEN 0      244            [::1]:5432          [::]:*    users:(("postgres",pid=900,fd=6))
"""

NETSTAT_OUTPUT = """\
Active Internet connections (only servers)
Proto Recv-Q Send-Q Local Address           Foreign Address         State       PID/Program name
tcp        0      0 0.0.0.0:8080            0.0.0.0:*               LISTEN      5678/python3
tcp        0      0 127.0.0.1:5432          0.0.0.0:*               LISTEN      901/postgres
tcp6       0      0 :::22                   :::*                    LISTEN      1/sshd
tcp6       0      0 ::1:631                 :::*                    LISTEN      -
"""


# ── ss ───────────────────────────────────────────────────────────────────────


def test_ss_node_line():
    record = parse_ss_line(
        'LISTEN 0 4096 127.0.0.1:3000 0.0.0.0:* users:(("node",pid=1234,fd=19))'
    )
    assert record is not None
    assert (record.port, record.address, record.process) == (3000, "127.0.0.1", "node")
    assert record.sort_priority == 0


def test_ss_first_endpoint_is_local_side():
    record = parse_ss_line("LISTEN 0 128 127.0.0.1:6379 10.0.0.2:5555")
    assert record is not None
    assert record.port == 6379
    assert record.address == "127.0.0.1"


def test_ss_with_netid_column():
    record = parse_ss_line('tcp LISTEN 0 128 0.0.0.0:22 0.0.0.0:* users:(("sshd",pid=1,fd=3))')
    assert record is not None
    assert (record.port, record.process) == (22, "sshd")


def test_ss_without_process_column():
    record = parse_ss_line("LISTEN 0 511 *:80 *:*")
    assert record is not None
    assert record.process is None
    assert record.address == "0.0.0.0"


def test_ss_empty_address_is_wildcard():
    record = parse_ss_line("LISTEN 0 128 :8081 :*")
    assert record is not None
    assert (record.port, record.address) == (8081, "0.0.0.0")


def test_ss_bare_ipv6_wildcard_kept():
    record = parse_ss_line("LISTEN 0 128 :::8081 :::*")
    assert record is not None
    assert (record.port, record.address) == (8081, "::")


def test_ss_unterminated_users_block():
    record = parse_ss_line('LISTEN 0 511 *:80 *:* users:(("nginx')
    assert record is not None
    assert record.process is None


def test_ss_requires_listen():
    assert parse_ss_line("ESTAB 0 0 10.0.0.1:22 10.0.0.9:51234") is None


def test_ss_rejects_netstat_layout():
    assert parse_ss_line("tcp 0 0 0.0.0.0:8080 0.0.0.0:* LISTEN 5678/python3") is None


@pytest.mark.parametrize(
    "line",
    [
        "LISTEN 0 128 0.0.0.0:0 0.0.0.0:*",
        "LISTEN 0 128 0.0.0.0:70000 0.0.0.0:*",
        "LISTEN 0 128 0.0.0.0:ssh 0.0.0.0:*",
    ],
)
def test_ss_invalid_ports(line):
    assert parse_ss_line(line) is None


# ── netstat ──────────────────────────────────────────────────────────────────


def test_netstat_python_line():
    record = parse_netstat_line("tcp 0 0 0.0.0.0:8080 0.0.0.0:* LISTEN 5678/python3")
    assert record is not None
    assert (record.port, record.address, record.process) == (8080, "0.0.0.0", "python3")
    assert record.sort_priority == 0


def test_netstat_bare_ipv6_wildcard():
    record = parse_netstat_line("tcp6 0 0 :::22 :::* LISTEN 1/sshd")
    assert record is not None
    assert record.address == "0.0.0.0"
    assert record.process == "sshd"


def test_netstat_ipv6_literal_passed_through():
    record = parse_netstat_line("tcp6 0 0 ::1:631 :::* LISTEN -")
    assert record is not None
    assert record.address == "::1"
    assert record.process is None


def test_netstat_requires_tcp_and_listen():
    assert parse_netstat_line("udp 0 0 0.0.0.0:68 0.0.0.0:* 700/dhclient") is None
    assert parse_netstat_line("tcp 0 0 10.0.0.1:22 10.0.0.9:5123 ESTABLISHED 9/sshd") is None


def test_netstat_too_few_columns():
    assert parse_netstat_line("tcp LISTEN 0") is None


# ── dispatcher ───────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "line",
    [
        "State  Recv-Q Send-Q Local Address:Port  Peer Address:Port Process",
        "Proto Recv-Q Send-Q Local Address Foreign Address State PID/Program name",
        "Netid State Recv-Q Send-Q Local Address:Port Peer Address:Port",
    ],
)
def test_header_lines(line):
    assert is_header_line(line)


def test_ss_output():
    ports = parse_linux_output(SS_OUTPUT)
    assert [(p.port, p.address, p.process) for p in ports] == [
        (3000, "127.0.0.1", "node"),
        (22, "0.0.0.0", "sshd"),
        (53, "127.0.0.53%lo", "systemd-resolve"),
        (80, "0.0.0.0", None),
        (5432, "::1", "postgres"),
    ]


def test_netstat_output():
    ports = parse_linux_output(NETSTAT_OUTPUT)
    assert [(p.port, p.address, p.process) for p in ports] == [
        (8080, "0.0.0.0", "python3"),
        (5432, "127.0.0.1", "postgres"),
        (22, "0.0.0.0", "sshd"),
        (631, "::1", None),
    ]


def test_malformed_lines_do_not_stop_parsing():
    output = "\n".join(
        [
            "LISTEN 0 128 0.0.0.0:70000 0.0.0.0:*",
            "tcp LISTEN",
            "",
            "garbage",
            'LISTEN 0 128 0.0.0.0:9000 0.0.0.0:* users:(("bun",pid=5,fd=7))',
        ]
    )
    ports = parse_linux_output(output)
    assert [(p.port, p.process) for p in ports] == [(9000, "bun")]


def test_ports_unique_and_in_range():
    ports = parse_linux_output(SS_OUTPUT + NETSTAT_OUTPUT)
    numbers = [p.port for p in ports]
    assert len(numbers) == len(set(numbers))
    assert all(1 <= n <= 65535 for n in numbers)


def test_parsing_is_repeatable():
    assert parse_linux_output(SS_OUTPUT) == parse_linux_output(SS_OUTPUT)
