def test_import_tcs_package() -> None:
    import importlib

    module = importlib.import_module("tcs")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from tcs.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_app() -> None:
    from tcs.presentation.cli import app

    assert callable(app.main)
