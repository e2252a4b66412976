import json
import logging

import pytest
import yaml

from metaOrchestra.ensemble import StackEnsemble, VoteEnsemble
from metaOrchestra.models import PrunedTree, SKLLearner
from metaOrchestra.utils.config import ConfigManager
from metaOrchestra.utils.logger import get_logger, setup_logging


@pytest.fixture
def stack_spec():
    return {
        "model": {
            "name": "StackEnsemble",
            "options": {
                "n_folds": 3,
                "keep_original_features": True,
                "learners": [
                    {"name": "PrunedTree"},
                    {"name": "SKLLearner", "options": {"learner": "GaussianNB"}},
                ],
                "stacker": {"name": "SKLLearner", "options": {"learner": "LogisticRegression"}},
            },
        },
        "logging": {"level": "DEBUG"},
    }


def test_default_config_builds_vote_ensemble():
    assert isinstance(ConfigManager().build(), VoteEnsemble)


def test_load_yaml_and_build(tmp_path, stack_spec, separable_data):
    path = tmp_path / "stack.yaml"
    path.write_text(yaml.safe_dump(stack_spec))

    manager = ConfigManager().load_from_file(path)
    ensemble = manager.build()

    assert manager.get_config()["logging"]["level"] == "DEBUG"
    assert manager.get_config()["logging"]["file"] is None
    assert isinstance(ensemble, StackEnsemble)
    assert ensemble.options["keep_original_features"] is True
    assert [type(learner) for learner in ensemble.learners] == [PrunedTree, SKLLearner]

    X_train, y_train, X_test, _ = separable_data
    assert len(ensemble.fit(X_train, y_train).transform(X_test)) == len(X_test)


def test_load_json(tmp_path, stack_spec):
    path = tmp_path / "stack.json"
    path.write_text(json.dumps(stack_spec))
    assert isinstance(ConfigManager().load_from_file(path).build(), StackEnsemble)


def test_save_and_reload_round_trip(tmp_path, stack_spec):
    manager = ConfigManager().update_config(**stack_spec)
    path = tmp_path / "nested" / "saved.yml"
    manager.save_to_file(path)

    assert ConfigManager().load_from_file(path).get_config() == manager.get_config()


def test_available_models_restrict_build(tmp_path, stack_spec):
    manager = ConfigManager().update_config(**stack_spec, available_models=["StackEnsemble", "PrunedTree"])
    with pytest.raises(ValueError):
        manager.build()


def test_unknown_keys_are_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        manager = ConfigManager().update_config(modle={"name": "PrunedTree"})
    assert "Unknown configuration key: modle" in caplog.text
    assert "modle" not in manager.get_config()


def test_missing_file_and_bad_suffix(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager().load_from_file(tmp_path / "absent.yaml")

    path = tmp_path / "config.toml"
    path.write_text("")
    with pytest.raises(ValueError):
        ConfigManager().load_from_file(path)
    with pytest.raises(ValueError):
        ConfigManager().save_to_file(path)


def test_configure_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    manager = ConfigManager().update_config(logging={"level": "INFO", "file": str(log_file)})
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    try:
        manager.configure_logging()
        logging.getLogger("metaOrchestra.test").info("configured")
        for handler in root.handlers:
            handler.flush()
        assert "configured" in log_file.read_text()
    finally:
        for handler in list(root.handlers):
            if handler not in handlers_before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level_before)


def test_setup_logging_prints_each_record_once(capsys):
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    try:
        logger = get_logger("RepeatCheck")
        setup_logging(logging.INFO)
        logger.info("printed once")

        assert capsys.readouterr().out.count("printed once") == 1
        assert logging.getLogger("metaOrchestra").handlers == []
    finally:
        for handler in list(root.handlers):
            if handler not in handlers_before:
                root.removeHandler(handler)
        root.setLevel(level_before)
