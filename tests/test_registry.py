import threading
from pathlib import Path

import pytest
import yaml

from enum_x import Enum, InvalidArgument, NotFound, Registry, SourceKind, UnsupportedQuery
from enum_x.registry import classify

# ============================================================================
# define / undefine
# ============================================================================


def test_missing_enum_through_attribute_raises(registry):
    with pytest.raises(NotFound, match="enum test_enum not found"):
        registry.test_enum


def test_missing_enum_through_indexer_is_none(registry):
    assert registry["test_enum"] is None
    assert "test_enum" not in registry


def test_define(registry):
    enum = registry.define("test_enum", ["one", "two"])
    assert isinstance(enum, Enum)
    assert registry["test_enum"] is enum
    assert registry.test_enum is enum
    assert registry.test_enum.values == ["one", "two"]


def test_define_overwrites(registry):
    registry.define("test_enum", ["one"])
    registry.define("test_enum", ["two"])
    assert registry["test_enum"].values == ["two"]
    assert len(registry) == 1


def test_undefine(registry):
    registry.define("test_enum", ["one", "two"])
    registry.undefine("test_enum")
    assert registry["test_enum"] is None
    with pytest.raises(NotFound):
        registry.test_enum
    registry.undefine("test_enum")  # no-op


def test_conversion_attribute_is_unsupported(registry):
    with pytest.raises(UnsupportedQuery):
        registry.to_json
    assert not hasattr(registry, "to_yaml")


def test_private_attributes_are_not_enums(registry):
    with pytest.raises(AttributeError):
        registry._missing


def test_registries_are_isolated():
    first, second = Registry(), Registry()
    first.define("only_here", ["a"])
    assert second["only_here"] is None


def test_registry_translator_is_passed_to_enums():
    translator = object()
    registry = Registry(translator=translator)
    assert registry.define("x", ["a"]).translator is translator


# ============================================================================
# Loading
# ============================================================================


@pytest.mark.parametrize(
    "path,kind",
    [
        ("enums.yml", SourceKind.YAML),
        ("enums.YAML", SourceKind.YAML),
        ("enums.py", SourceKind.SCRIPT),
        ("enums.txt", SourceKind.OTHER),
    ],
)
def test_classify(path, kind):
    assert classify(path) is kind


def test_lazy_yaml_loading(roles_registry):
    assert roles_registry._enums is None
    assert isinstance(roles_registry["roles"], Enum)
    assert roles_registry["roles"].values == ["admin", "user", "guest"]
    assert roles_registry.kinds["returned"].format("legacy") == "back"
    assert roles_registry.kinds["sent"].format("legacy") == "sent"
    assert roles_registry.names() == ["roles", "statuses", "kinds"]


def test_loading_happens_once(write_enums):
    path = write_enums("enum_one: [one, two, three]\n")
    calls = []

    def loader(source, kind):
        calls.append((source, kind))
        registry.load_yaml(source)

    registry = Registry(load_paths=path, loader=loader)
    assert registry["enum_one"].values == ["one", "two", "three"]
    assert registry["enum_one"] is registry["enum_one"]
    assert calls == [(path, SourceKind.YAML)]


def test_string_and_attribute_access_agree(roles_registry):
    assert roles_registry["statuses"] is roles_registry.statuses


def test_loader_object(write_enums):
    path = write_enums("ignored", name="enums.txt")

    class Loader:
        def __init__(self):
            self.seen = []

        def load_enums_from(self, source, kind):
            self.seen.append(kind)
            registry.define("custom", ["x"])

    loader = Loader()
    registry = Registry(load_paths=[path], loader=loader)
    assert registry["custom"].values == ["x"]
    assert loader.seen == [SourceKind.OTHER]


def test_script_sources(tmp_path: Path):
    script = tmp_path / "enums.py"
    script.write_text(
        'registry.define("colors", ["red", "green"])\n'
        'registry.define("sizes", [{"value": "s", "label": "small"}])\n',
        encoding="utf-8",
    )
    registry = Registry(load_paths=[script])
    assert registry.colors.values == ["red", "green"]
    assert registry.sizes["s"].format("label") == "small"


def test_unrecognized_sources_are_skipped(write_enums):
    path = write_enums("roles: [admin]\n", name="enums.txt")
    registry = Registry(load_paths=[path])
    assert registry["roles"] is None


def test_later_sources_overwrite(write_enums):
    first = write_enums("roles: [admin]\n", name="a.yml")
    second = write_enums("roles: [user]\n", name="b.yml")
    registry = Registry(load_paths=[first, second])
    assert registry.roles.values == ["user"]


def test_missing_source_propagates(tmp_path: Path):
    registry = Registry(load_paths=[tmp_path / "missing.yml"])
    with pytest.raises(FileNotFoundError):
        registry["roles"]


def test_invalid_yaml_propagates(write_enums):
    registry = Registry(load_paths=[write_enums("roles: [admin\n")])
    with pytest.raises(yaml.YAMLError):
        registry["roles"]


@pytest.mark.parametrize("text", ["- a\n- b\n", "roles: admin\n"])
def test_malformed_definitions(write_enums, text):
    registry = Registry(load_paths=[write_enums(text)])
    with pytest.raises(InvalidArgument):
        registry.init()


def test_empty_enum_definition(write_enums):
    registry = Registry(load_paths=[write_enums("empty:\n")])
    assert len(registry.empty) == 0


def test_define_before_first_lookup_skips_loading(roles_registry):
    roles_registry.define("extra", ["x"])
    assert roles_registry["roles"] is None
    assert roles_registry.extra.values == ["x"]


def test_init_and_reset(roles_registry):
    roles_registry.define("extra", ["x"])
    roles_registry.init()
    assert roles_registry["extra"] is None
    assert roles_registry["roles"] is not None

    roles_registry.define("extra", ["x"])
    roles_registry.reset()
    assert roles_registry["extra"] is None
    assert roles_registry["roles"] is not None


def test_iteration(roles_registry):
    assert [enum.name for enum in roles_registry] == ["roles", "statuses", "kinds"]


def test_concurrent_access_during_lazy_loading(write_enums):
    path = write_enums("roles: [admin, user]\n")
    calls = []
    started = threading.Event()
    release = threading.Event()

    def loader(source, kind):
        calls.append(source)
        started.set()
        release.wait(timeout=5)
        registry.load_yaml(source)

    registry = Registry(load_paths=[path], loader=loader)
    results = []

    def look_up():
        results.append(registry["roles"])

    first = threading.Thread(target=look_up)
    first.start()
    assert started.wait(timeout=5)
    threads = [threading.Thread(target=look_up) for _ in range(4)]
    threads.append(threading.Thread(target=registry.define, args=("extra", ["x"])))
    for thread in threads:
        thread.start()
    release.set()
    for thread in [first, *threads]:
        thread.join(timeout=5)

    assert calls == [path]
    assert len(results) == 5
    assert all(enum is results[0] for enum in results)
    assert results[0].values == ["admin", "user"]
    assert registry["extra"].values == ["x"]
