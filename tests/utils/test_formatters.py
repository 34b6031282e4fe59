"""
Unit tests for output formatters and console reporting.
"""
import pytest
import json
import csv
import io

from subprobe.core.exceptions import OutputError
from subprobe.core.interfaces import Result, Subdomain
from subprobe.utils.formatters import (
    TextFormatter, JSONFormatter, CSVFormatter, FormatterFactory,
    ConsoleReporter, ensure_writable, write_output, read_names
)


@pytest.fixture
def sample_result():
    """Create a sample result for testing."""
    result = Result()
    result.subdomains = {
        "mail.example.com": Subdomain(
            name="mail.example.com",
            domain="example.com",
            ip_addresses=["93.184.216.35"]
        ),
        "www.example.com": Subdomain(
            name="www.example.com",
            domain="example.com",
            ip_addresses=["2606:2800:220:1::248", "93.184.216.34"]
        ),
    }
    result.stats.update({
        'total_candidates': 3,
        'total_subdomains': 2,
        'failed': 1,
        'elapsed': 0.5,
    })
    return result


class TestFormatters:
    """Test output formatters."""

    def test_text_formatter(self, sample_result):
        """Test text output is one name per line in discovery order."""
        output = TextFormatter().format(sample_result)

        assert output == "mail.example.com\nwww.example.com\n"

    def test_text_formatter_empty(self):
        """Test an empty result formats to an empty file."""
        assert TextFormatter().format(Result()) == ""

    def test_json_formatter(self, sample_result):
        """Test JSON output keeps order, addresses and stats."""
        data = json.loads(JSONFormatter().format(sample_result))

        assert [s['name'] for s in data['subdomains']] == ["mail.example.com", "www.example.com"]
        assert data['subdomains'][1]['ip_addresses'] == ["2606:2800:220:1::248", "93.184.216.34"]
        assert data['stats']['total_subdomains'] == 2

    def test_csv_formatter(self, sample_result):
        """Test CSV output has a header and one row per subdomain."""
        rows = list(csv.reader(io.StringIO(CSVFormatter().format(sample_result))))

        assert rows[0] == ['Subdomain', 'IP Addresses']
        assert rows[1] == ['mail.example.com', '93.184.216.35']
        assert rows[2] == ['www.example.com', '2606:2800:220:1::248, 93.184.216.34']

    def test_formatter_factory(self):
        """Test the factory maps format names to formatters."""
        assert isinstance(FormatterFactory.create_formatter('text'), TextFormatter)
        assert isinstance(FormatterFactory.create_formatter('json'), JSONFormatter)
        assert isinstance(FormatterFactory.create_formatter('csv'), CSVFormatter)

        with pytest.raises(ValueError):
            FormatterFactory.create_formatter('xml')


class TestOutputFile:
    """Test writing results to disk."""

    def test_write_and_read_back(self, tmp_path, sample_result):
        """Test the text file round-trips to the discovered names."""
        output_file = tmp_path / "found.txt"

        write_output(sample_result, str(output_file))

        assert output_file.read_text(encoding="utf-8") == "mail.example.com\nwww.example.com\n"
        assert read_names(str(output_file)) == sample_result.names

    def test_write_json(self, tmp_path, sample_result):
        """Test the JSON format is written when requested."""
        output_file = tmp_path / "found.json"

        write_output(sample_result, str(output_file), 'json')

        data = json.loads(output_file.read_text(encoding="utf-8"))
        assert len(data['subdomains']) == 2

    def test_write_unwritable(self, tmp_path, sample_result):
        """Test an unwritable path raises OutputError."""
        with pytest.raises(OutputError):
            write_output(sample_result, str(tmp_path / "missing" / "found.txt"))

    def test_ensure_writable_leaves_no_file(self, tmp_path):
        """Test the writability check removes a file it had to create."""
        output_file = tmp_path / "found.txt"

        ensure_writable(str(output_file))

        assert not output_file.exists()

    def test_ensure_writable_does_not_truncate(self, tmp_path):
        """Test the writability check keeps existing content."""
        output_file = tmp_path / "found.txt"
        output_file.write_text("old.example.com\n", encoding="utf-8")

        ensure_writable(str(output_file))

        assert output_file.read_text(encoding="utf-8") == "old.example.com\n"

    def test_ensure_writable_fails(self, tmp_path):
        """Test the writability check rejects a path in a missing directory."""
        with pytest.raises(OutputError):
            ensure_writable(str(tmp_path / "missing" / "found.txt"))


class TestConsoleReporter:
    """Test console reporting."""

    def test_discovery_line(self):
        """Test a discovery prints the name and its addresses."""
        stream = io.StringIO()
        reporter = ConsoleReporter(stream=stream)

        reporter.on_discovery(Subdomain("www.example.com", "example.com", ["1.1.1.1", "2.2.2.2"]))

        assert stream.getvalue() == "[+] www.example.com  => 1.1.1.1, 2.2.2.2\n"

    def test_silent_discovery_line(self):
        """Test silent mode prints the bare name."""
        stream = io.StringIO()
        reporter = ConsoleReporter(silent=True, stream=stream)

        reporter.on_discovery(Subdomain("www.example.com", "example.com", ["1.1.1.1"]))

        assert stream.getvalue() == "www.example.com\n"

    def test_start_and_wildcard(self):
        """Test the banner, target echo and wildcard warning."""
        stream = io.StringIO()
        reporter = ConsoleReporter(stream=stream)

        reporter.on_start("example.com", 3, 100, "words.txt")
        reporter.on_wildcard(["1.2.3.4"])

        output = stream.getvalue()
        assert "[*] Target: example.com" in output
        assert "[*] Threads: 100" in output
        assert "[*] Wordlist: words.txt" in output
        assert "Loaded 3 words" in output
        assert "[!] Wildcard detected! Filtering results pointing to: 1.2.3.4" in output

    def test_summary(self, sample_result):
        """Test the completion summary and saved-file confirmation."""
        stream = io.StringIO()
        reporter = ConsoleReporter(stream=stream)

        reporter.on_complete(sample_result, "found.txt")

        output = stream.getvalue()
        assert "Total subdomains discovered: 2" in output
        assert "Saved 2 results to found.txt" in output

    def test_silent_suppresses_chatter(self, sample_result):
        """Test silent mode prints nothing but discoveries."""
        stream = io.StringIO()
        reporter = ConsoleReporter(silent=True, stream=stream)

        reporter.on_start("example.com", 3, 100)
        reporter.on_wildcard(["1.2.3.4"])
        reporter.on_complete(sample_result, "found.txt")

        assert stream.getvalue() == ""
