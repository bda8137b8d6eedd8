from pathlib import Path

import pytest


@pytest.fixture
def binding_root(tmp_path: Path) -> Path:
    """
    A service binding root with three bindings and one stray file:

        root/
          test-k8s/        type, provider, test-secret-key, .hidden-data/
          test-name-2/     type
          test-name-3/     (empty)
          additional-file
    """
    root = tmp_path / "bindings"
    k8s = root / "test-k8s"
    (k8s / ".hidden-data").mkdir(parents=True)
    (k8s / "type").write_text("test-type-1\n")
    (k8s / "provider").write_text("test-provider-1\n")
    (k8s / "test-secret-key").write_text("test-secret-value\n")

    second = root / "test-name-2"
    second.mkdir()
    (second / "type").write_text("test-type-2\n")

    (root / "test-name-3").mkdir()
    (root / "additional-file").write_text("not a binding\n")
    return root


@pytest.fixture(autouse=True)
def clear_binding_env(monkeypatch):
    # Keep tests independent of the host's service binding environment.
    monkeypatch.delenv("SERVICE_BINDING_ROOT", raising=False)
    monkeypatch.delenv("SERVICE_BINDING_CACHE", raising=False)
