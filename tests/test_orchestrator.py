"""End-to-end tests of the REPL, driven through in-memory streams."""

import io

from univsaver.commands import Command
from univsaver.config import AppSettings
from univsaver.models.audit import AuditEventType
from univsaver.orchestrator import UNivUSaver

SEPARATOR = "\t-------------------------------------"


class ExplodingCommand(Command):
    COMMAND_WORD = "explode"
    COMMAND_GUIDE = "explode"
    COMMAND_DESCRIPTION = "Always fails"

    def run(self, arguments):
        raise RuntimeError("kaboom")


class ExplodingApp(UNivUSaver):

    def setup_commands(self):
        super().setup_commands()
        self.parser.register_commands(ExplodingCommand())


class TestReplLoop:
    """Tests for the read-dispatch-print loop."""

    def test_greets_and_says_bye(self, run_app):
        """Test the greeting and the farewell."""
        app, output = run_app("bye")

        assert output.splitlines()[0] == "\tHello, uNivUSaver is willing to help!"
        assert "\tBye. Hope to see you again soon!" in output
        assert app.is_running is False

    def test_results_are_bracketed_by_separators(self, run_app):
        """Test that each result sits between two separator lines."""
        _, output = run_app("view-category", "bye")
        lines = output.splitlines()
        assert lines[1:4] == [SEPARATOR, "\tNo categories found.", SEPARATOR]

    def test_add_then_list(self, run_app):
        """Test that added transactions show up in list."""
        app, output = run_app(
            "add-income salary a/1000 d/2024-10-01",
            "add-expense lunch at cafe a/12.50 d/2024-10-02 12:30 c/food",
            "list",
            "bye",
        )

        assert len(app.transactions) == 2
        assert "\tAll transactions:" in output
        assert "\t1. [Income] salary | $1000.00 | 2024-10-01 00:00" in output
        assert "\t2. [Expense] lunch at cafe | $12.50 | 2024-10-02 12:30 | food" in output

    def test_invalid_command_keeps_running(self, run_app):
        """Test that an unknown keyword does not stop the loop."""
        app, output = run_app("dance", "add-category food", "bye")

        assert "\tInvalid command." in output
        assert len(app.categories) == 1

    def test_invalid_delete_keeps_running(self, run_app):
        """Test that a bad index does not stop the loop."""
        app, output = run_app(
            "add-expense tea a/2",
            "delete-transaction i/5",
            "list",
            "bye",
        )

        assert "\tInvalid transaction index!" in output
        assert len(app.transactions) == 1

    def test_amount_above_limit_keeps_running(self, run_app):
        """Test that an oversized amount is rejected and the loop goes on."""
        app, output = run_app("add-expense yacht a/1e27", "add-expense tea a/2", "bye")

        assert "\tAmount cannot exceed 9999999999999.99" in output
        assert len(app.transactions) == 1

    def test_blank_lines_are_skipped(self, run_app):
        """Test that blank input lines are ignored."""
        _, output = run_app("", "   ", "bye")
        assert "Invalid command." not in output

    def test_end_of_input_behaves_like_bye(self):
        """Test that running out of input ends the session."""
        stdout = io.StringIO()
        app = UNivUSaver(input_stream=io.StringIO("add-category food\n"), output_stream=stdout)
        app.run()

        assert app.is_running is False
        assert "\tBye. Hope to see you again soon!" in stdout.getvalue()

    def test_totals_after_delete(self, run_app):
        """Test that totals reflect a deletion."""
        _, output = run_app(
            "add-income salary a/100",
            "add-expense rent a/70",
            "add-expense snack a/5",
            "delete-transaction i/3",
            "view-total",
            "bye",
        )
        assert "\tTotal income: $100.00 (1 transaction(s))" in output
        assert "\tTotal expense: $70.00 (1 transaction(s))" in output
        assert "\tBalance: $30.00" in output

    def test_help_lists_registered_commands(self, run_app):
        """Test that help covers every registered keyword."""
        app, output = run_app("help", "bye")
        for word in app.parser.get_commands():
            assert f"\t{word}: " in output

    def test_session_is_audited(self, run_app):
        """Test that session start, changes and session end are audited."""
        app, _ = run_app("add-category food", "bye")
        storage = app.audit_logger.storage

        assert len(storage.get_events_by_type(AuditEventType.SESSION_STARTED)) == 1
        assert len(storage.get_events_by_type(AuditEventType.CATEGORY_ADDED)) == 1
        ended = storage.get_events_by_type(AuditEventType.SESSION_ENDED)
        assert ended[0].details == {"transaction_count": 0, "category_count": 1}


class TestInjectedSettings:
    """Tests that the settings given to the app shape its output."""

    def test_custom_currency_and_date_formats(self):
        """Test a session run with non-default currency and date formats."""
        settings = AppSettings(
            currency_symbol="EUR ",
            date_format="%d.%m.%Y",
            datetime_format="%d.%m.%Y %H:%M",
        )
        stdin = io.StringIO(
            "add-expense tea a/2 d/01.10.2024\n"
            "list\n"
            "view-total\n"
            "history f/01.10.2024\n"
            "bye\n"
        )
        stdout = io.StringIO()
        UNivUSaver(input_stream=stdin, output_stream=stdout, settings=settings).run()

        output = stdout.getvalue()
        assert "\t1. [Expense] tea | EUR 2.00 | 01.10.2024 00:00" in output
        assert "\tTotal expense: EUR 2.00 (1 transaction(s))" in output
        assert "\tTransaction history (from 01.10.2024):" in output
        assert "$" not in output

    def test_custom_prefix_and_separator(self):
        """Test that the prefix and separator come from settings."""
        settings = AppSettings(output_prefix="> ", separator="====")
        stdout = io.StringIO()
        UNivUSaver(
            input_stream=io.StringIO("view-category\nbye\n"),
            output_stream=stdout,
            settings=settings,
        ).run()

        lines = stdout.getvalue().splitlines()
        assert lines[1:4] == ["> ====", "> No categories found.", "> ===="]


class TestUnexpectedErrors:
    """Tests for failures nobody anticipated."""

    def test_unexpected_error_is_logged_and_loop_continues(self):
        """Test that an unexpected exception is audited and state survives."""
        stdin = io.StringIO("add-expense tea a/2\nexplode\nlist\nbye\n")
        stdout = io.StringIO()
        app = ExplodingApp(input_stream=stdin, output_stream=stdout)
        app.run()

        output = stdout.getvalue()
        assert "\tSomething went wrong. Please try again." in output
        # State survives the failure
        assert "\t1. [Expense] tea" in output
        assert len(app.transactions) == 1

        errors = app.audit_logger.storage.get_events_by_type(AuditEventType.SYSTEM_ERROR)
        assert errors[0].error_message == "kaboom"


class TestProcessLine:
    """Tests for driving the app one line at a time."""

    def test_process_line_before_run(self):
        """Test process_line after start without the loop."""
        app = UNivUSaver(input_stream=io.StringIO(), output_stream=io.StringIO())
        app.start()

        assert app.process_line("add-category books desc/Course materials") == [
            "Category added: books: Course materials"
        ]
        assert app.process_line("VIEW-CATEGORY") == ["All categories:", "1. books: Course materials"]

    def test_process_line_stops_on_bye(self):
        """Test that bye clears the running flag."""
        app = UNivUSaver(input_stream=io.StringIO(), output_stream=io.StringIO())
        app.start()
        assert app.is_running is True

        app.process_line("bye")
        assert app.is_running is False

    def test_show_command_result_none_prints_nothing(self):
        """Test that a None result prints nothing."""
        stdout = io.StringIO()
        app = UNivUSaver(input_stream=io.StringIO(), output_stream=stdout)
        app.show_command_result(None)
        assert stdout.getvalue() == ""
