import importlib
import importlib.metadata as metadata
import builtins
import io

def test_version_fallback(monkeypatch):
    # Force PackageNotFoundError
    monkeypatch.setattr(metadata, "version", lambda _: (_ for _ in ()).throw(metadata.PackageNotFoundError))

    # Fake pyproject.toml content
    fake_toml = b"[project]\nversion = '0.1.0'\n"
    monkeypatch.setattr(builtins, "open", lambda *_: io.BytesIO(fake_toml))

    # Reload the module so the fallback branch executes
    import unitable
    importlib.reload(unitable)

    assert unitable.__version__ == "0.1.0"


def test_public_api_exports():
    import unitable

    for name in unitable.__all__:
        assert hasattr(unitable, name), name
    assert unitable.UnitTable is unitable.ConversionMatrix
