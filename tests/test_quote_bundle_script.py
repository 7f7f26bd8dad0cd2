"""
Tests for the quote_bundle script.
"""

from scripts.quote_bundle import format_quote, main


def test_main_prints_quote(capsys):
    """Test that a valid selection is priced and printed."""
    quote = main(["Photography", "VideoRecording", "WeddingSession"], 2022)

    assert quote.final_price == 2500
    out = capsys.readouterr().out
    assert "Base price:  4400" in out
    assert "Final price: 2500" in out
    assert "VideoPhotoWedding (-1900)" in out


def test_main_without_discount(capsys):
    quote = main(["TwoDayEvent"], 2021)

    assert quote.final_price == 400
    assert "Discount:    none" in capsys.readouterr().out


def test_main_rejects_unknown_year():
    """Test that an unsupported year is reported instead of raised."""
    assert main(["Photography"], 2030) is None


def test_main_rejects_unknown_service():
    assert main(["Drone"], 2021) is None


def test_format_empty_quote():
    quote = main([], 2021)

    assert format_quote(quote).startswith("Base price:  0")


def test_log_level_from_environment(monkeypatch):
    """Test that the script takes its log level from LOG_LEVEL."""
    import importlib

    import scripts.quote_bundle as quote_bundle

    monkeypatch.setenv("LOG_LEVEL", "debug")
    reloaded = importlib.reload(quote_bundle)

    assert reloaded.LOG_LEVEL == "debug"

    monkeypatch.delenv("LOG_LEVEL")
    assert importlib.reload(quote_bundle).LOG_LEVEL == "INFO"
