import importlib

from leaderboard import config


def test_legacy_postgres_scheme_is_rewritten(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'postgres://u:p@db.example.com:5432/scores')
    assert config._database_url() == 'postgresql://u:p@db.example.com:5432/scores'


def test_database_url_passes_through(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///local.db')
    assert config._database_url() == 'sqlite:///local.db'


def test_database_url_default(monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)
    assert config._database_url().startswith('postgresql://')


def test_split_csv():
    assert config._split_csv('https://a.example, https://b.example ,,') == ['https://a.example', 'https://b.example']
    assert config._split_csv('') == []
    assert config._split_csv(None) == []


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'postgres://localhost/board')
    monkeypatch.setenv('CORS_ORIGINS', 'http://localhost:3000,https://board.example')
    monkeypatch.setenv('BCRYPT_LOG_ROUNDS', '10')
    monkeypatch.setenv('TOP_SCORES_LIMIT', '25')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.Config.SQLALCHEMY_DATABASE_URI == 'postgresql://localhost/board'
        assert reloaded.Config.CORS_ORIGINS == ['http://localhost:3000', 'https://board.example']
        assert reloaded.Config.BCRYPT_LOG_ROUNDS == 10
        assert reloaded.Config.TOP_SCORES_LIMIT == 25
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_cors_defaults_to_any_origin(monkeypatch):
    monkeypatch.delenv('CORS_ORIGINS', raising=False)
    try:
        assert importlib.reload(config).Config.CORS_ORIGINS == '*'
    finally:
        monkeypatch.undo()
        importlib.reload(config)
