"""
Tests for the console entry point
"""


import pytest

from newrial.main import build_parser, main
from newrial.services.converter_service import ConverterService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NEWRIAL_LANG", "NEWRIAL_REVERSE", "NEWRIAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestMain:
    """Tests for main()"""

    def test_old_to_new_en(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["553140", "--lang", "en"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "55 New Rial & 31 Qeran",
            "New Rial (in words): 55 rial(s) and 31 qeran",
            "Approximate: 55,314 old Tomans",
        ]

    def test_new_to_old_fa(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["55", "--reverse", "--qeran", "40", "--lang", "fa"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "۵۵۴٬۰۰۰ ریال قدیم"

    def test_reverse_flag_before_amount(self, capsys: pytest.CaptureFixture) -> None:
        """The amount is never mistaken for the qeran"""
        assert main(["--reverse", "55", "--lang", "en"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "550,000 Old Rial"

    def test_garbage_amount(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["not-a-number", "--lang", "en"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "0 New Rial & 0 Qeran"

    def test_very_large_amount(self, capsys: pytest.CaptureFixture) -> None:
        """A 5000-digit amount prints its own conversion, not a stale zero"""
        assert main(["9" * 5000, "--lang", "en"]) == 0
        headline = capsys.readouterr().out.splitlines()[0]
        assert headline.startswith("9,999,")
        assert headline.endswith(" New Rial & 99 Qeran")

    def test_failed_conversion_exits_nonzero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """No stale view is printed when the edit handler fails"""
        def broken_edit(self, field, text):
            raise RuntimeError("broken")

        monkeypatch.setattr(ConverterService, "edit", broken_edit)
        assert main(["553140", "--lang", "en"]) == 1
        assert capsys.readouterr().out == ""


class TestParser:
    """Tests for build_parser()"""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert (args.amount, args.reverse, args.qeran, args.lang) == ("", False, "", None)
