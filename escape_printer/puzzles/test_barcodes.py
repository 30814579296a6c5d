from escape_printer.puzzles import barcodes


def test_empty_text_has_no_barcode():
    assert barcodes.generate_barcode("") is None
    assert barcodes.generate_barcode(None) is None


def test_encodes_png_data_uri():
    uri = barcodes.generate_barcode("EXIT-42")
    assert uri.startswith("data:image/png;base64,")
    assert len(uri) > 100


def test_encoder_failure_returns_none(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("printer font missing")

    monkeypatch.setattr(barcodes, "Code128", boom)
    assert barcodes.generate_barcode("EXIT") is None
