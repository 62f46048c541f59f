"""
全局配置测试
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from flatfsm.model import Settings, get_settings, reload_settings


class TestSettings(unittest.TestCase):
    """测试从环境变量与 .env 文件加载配置"""

    def tearDown(self) -> None:
        reload_settings()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        self.assertIsNone(settings.pool_max_idle)
        self.assertEqual(settings.flowchart_initial_color, "#aaaaaa")
        self.assertEqual(settings.flowchart_current_color, "#ff0000")

    def test_env_override(self) -> None:
        env = {
            "FLATFSM_POOL_MAX_IDLE": "8",
            "FLATFSM_FLOWCHART_CURRENT_COLOR": "#00ff00",
        }
        with patch.dict(os.environ, env):
            settings = reload_settings()

        self.assertEqual(settings.pool_max_idle, 8)
        self.assertEqual(settings.flowchart_current_color, "#00ff00")
        self.assertIs(get_settings(), settings)

    def test_env_file(self) -> None:
        with tempfile.NamedTemporaryFile("w", suffix=".env", delete=False) as f:
            f.write("FLATFSM_POOL_MAX_IDLE=3\n")
            path = f.name
        try:
            with patch.dict(os.environ, {"FLATFSM_ENV_FILE": path}):
                settings = Settings()
            self.assertEqual(settings.pool_max_idle, 3)
        finally:
            os.unlink(path)

    def test_negative_pool_size_is_invalid(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(pool_max_idle=-1)


if __name__ == "__main__":
    unittest.main()
