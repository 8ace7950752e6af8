"""
配置测试
"""
import os
import sys
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

from pinseg.engine.config import SegmenterConfig, ServerConfig, DEFAULT_CONFIG


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        self.assertTrue(DEFAULT_CONFIG.normalize_case)
        self.assertTrue(DEFAULT_CONFIG.warn_on_gap)
        self.assertEqual(SegmenterConfig(), DEFAULT_CONFIG)

    def test_server_from_env(self):
        env = {'HOST': '127.0.0.1', 'PORT': '8080', 'LOG_LEVEL': 'DEBUG'}
        with mock.patch.dict(os.environ, env):
            config = ServerConfig.from_env()
        self.assertEqual(config, ServerConfig(host='127.0.0.1', port=8080, log_level='debug'))

    def test_server_env_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            config = ServerConfig.from_env()
        self.assertEqual(config, ServerConfig())


if __name__ == '__main__':
    unittest.main()
