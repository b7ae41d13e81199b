"""
Tests for the operation table and its agreement with the Dify YAML declarations.
"""

from pathlib import Path

import pytest
import yaml

from tools.errors import UnknownOperationError
from tools.operations import WordPressOperation
from tools.registry import TOOL_CLASSES, resolve_tool_class
from tools.upload_media import UploadMediaTool

ROOT = Path(__file__).resolve().parent.parent


def test_every_operation_has_a_tool_class():
    assert set(TOOL_CLASSES) == set(WordPressOperation)
    for operation, tool_cls in TOOL_CLASSES.items():
        assert tool_cls.operation == operation.value


def test_resolve_known_tool():
    assert resolve_tool_class("wordpress_upload_media") is UploadMediaTool


@pytest.mark.parametrize("name", ["wordpress_list_pages", "", "WORDPRESS_LIST_POSTS"])
def test_resolve_unknown_tool(name):
    with pytest.raises(UnknownOperationError) as excinfo:
        resolve_tool_class(name)

    assert str(excinfo.value) == f"Unknown tool: {name}"


def test_provider_yaml_declares_exactly_the_registered_tools():
    provider = yaml.safe_load((ROOT / "provider" / "wordpress.yaml").read_text(encoding="utf-8"))

    declared = {}
    for tool_yaml in provider["tools"]:
        declaration = yaml.safe_load((ROOT / tool_yaml).read_text(encoding="utf-8"))
        declared[declaration["identity"]["name"]] = declaration["extra"]["python"]["source"]

    assert set(declared) == {operation.value for operation in WordPressOperation}
    for name, source in declared.items():
        tool_cls = resolve_tool_class(name)
        assert Path(source).stem == tool_cls.__module__.rsplit(".", 1)[-1]
