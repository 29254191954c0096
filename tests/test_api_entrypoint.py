import importlib
import importlib.util
import sys
import warnings
from pathlib import Path
from unittest.mock import patch

from pydantic.warnings import PydanticDeprecatedSince20

import internal.api.schemas.common_schemas as common_schemas


def load_api_main():
    # Import cmd/api/main.py by path to avoid conflict with stdlib cmd
    file_path = Path(__file__).resolve().parent.parent / "cmd" / "api" / "main.py"
    spec = importlib.util.spec_from_file_location("ioc_api_main", file_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_importing_entrypoint_does_not_build_an_app():
    with patch("internal.api.app.create_app") as mock_create_app:
        module = load_api_main()

    mock_create_app.assert_not_called()
    assert not hasattr(module, "app")
    sys.modules.pop("ioc_api_main", None)


def test_schemas_use_current_pydantic_config():
    with warnings.catch_warnings():
        warnings.simplefilter("error", PydanticDeprecatedSince20)
        module = importlib.reload(common_schemas)

    assert "examples" in module.StandardResponse.model_config["json_schema_extra"]
    assert "examples" in module.HealthResponse.model_config["json_schema_extra"]
