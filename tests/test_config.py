from __future__ import annotations

from othello.config import Config


def test_missing_file_gives_defaults(tmp_path):
    cfg = Config.load_from_toml(str(tmp_path / "absent.toml"))
    assert cfg.search.default_depth == 5
    assert cfg.search.endgame_depth == 10
    assert cfg.web.port == 5000
    assert cfg.log_level == "INFO"


def test_toml_overrides_known_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'log_level = "DEBUG"\n'
        "[search]\n"
        "default_depth = 3\n"
        "bogus = 1\n"
        "[web]\n"
        "port = 8080\n"
    )
    cfg = Config.load_from_toml(str(path))
    assert cfg.search.default_depth == 3
    assert cfg.search.midgame_depth == 7
    assert not hasattr(cfg.search, "bogus")
    assert cfg.web.port == 8080
    assert cfg.log_level == "DEBUG"
