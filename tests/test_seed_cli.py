"""
Tests for the seed command line (scripts/seed.py).
"""
import pytest

from scripts.seed import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main


def run_cli(*argv) -> int:
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    return exc.value.code


class TestRun:
    @pytest.mark.integration
    def test_run_all_succeeds(self, cli_env, capsys):
        assert run_cli("run") == EXIT_OK

        out = capsys.readouterr().out
        assert "All seeds completed successfully!" in out
        assert "inventory: created=15 skipped=0 appended=7" in out

    @pytest.mark.integration
    def test_run_single_domain(self, cli_env, store_dir):
        assert run_cli("run", "auth") == EXIT_OK
        assert (store_dir / "auth.db").exists()
        assert not (store_dir / "hr.db").exists()

    @pytest.mark.integration
    def test_unknown_domain_is_usage_error(self, cli_env, store_dir, capsys):
        assert run_cli("run", "billing") == EXIT_USAGE

        err = capsys.readouterr().err
        assert "Unknown domain: 'billing'" in err
        assert "usage:" in err
        assert list(store_dir.iterdir()) == []

    @pytest.mark.integration
    def test_dependent_domain_before_auth_fails(self, cli_env, capsys):
        assert run_cli("run", "hr") == EXIT_FAILURE
        assert "Seed failed for hr" in capsys.readouterr().err

    @pytest.mark.integration
    def test_unopenable_store_names_failing_domain(self, cli_env, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        cli_env.setenv("HR_DATABASE_URL", f"sqlite:///{blocker / 'hr.db'}")

        assert run_cli("run") == EXIT_FAILURE
        assert "Seed failed for hr" in capsys.readouterr().err

    @pytest.mark.integration
    @pytest.mark.parametrize("argv", [("run",), ("run", "auth"), ("run", "billing")])
    def test_production_refused(self, cli_env, store_dir, capsys, argv):
        cli_env.setenv("APP_ENV", "production")

        assert run_cli(*argv) == EXIT_FAILURE
        assert "Cannot run seeds in production environment!" in capsys.readouterr().err
        assert list(store_dir.iterdir()) == []


class TestVerifyStock:
    @pytest.mark.integration
    def test_reports_discrepancy(self, cli_env, capsys):
        run_cli("run")
        capsys.readouterr()

        assert run_cli("verify-stock") == EXIT_FAILURE
        out = capsys.readouterr().out
        assert "1 product(s) disagree" in out
        assert "prod-006" in out


class TestCredentials:
    @pytest.mark.unit
    def test_prints_demo_logins(self, cli_env, capsys):
        cli_env.setenv("SEED_USER_PASSWORD", "s3cret")

        assert run_cli("credentials") == EXIT_OK
        out = capsys.readouterr().out
        assert "admin@vibe-dental.com" in out
        assert "s3cret" in out
