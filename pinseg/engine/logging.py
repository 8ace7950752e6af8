"""
统一日志配置模块

提供结构化日志、文件轮转、耗时记录等功能
"""

import os
import sys
import logging
import orjson
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional
from pathlib import Path
from functools import wraps
import time


# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent.parent
LOG_DIR = PROJECT_ROOT / 'logs'


class JsonFormatter(logging.Formatter):
    """JSON 格式日志（便于日志分析工具解析）"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # 添加额外字段
        if hasattr(record, 'request_id'):
            log_data['request_id'] = record.request_id
        if hasattr(record, 'duration_ms'):
            log_data['duration_ms'] = record.duration_ms
        if hasattr(record, 'extra_data'):
            log_data['data'] = record.extra_data

        # 异常信息
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return orjson.dumps(log_data).decode('utf-8')


class ColorFormatter(logging.Formatter):
    """彩色控制台输出"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, '')
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def setup_logging(
    name: str = 'pinseg',
    level: str = 'INFO',
    log_to_file: bool = True,
    log_to_console: bool = True,
    json_format: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    配置日志系统

    Args:
        name: 日志器名称
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: 是否写入文件
        log_to_console: 是否输出到控制台
        json_format: 是否使用 JSON 格式（适合生产环境）
        max_bytes: 单个日志文件最大大小
        backup_count: 保留的日志文件数量

    Returns:
        配置好的 Logger 实例
    """
    logger = logging.getLogger(name)
    # 无法识别的级别名按 INFO 处理
    level_value = getattr(logging, str(level).upper(), None)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logger.setLevel(level_value)

    # 清除已有 handlers（避免重复添加）
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_format = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'
    simple_format = '%(asctime)s | %(levelname)-8s | %(message)s'

    # 控制台输出（stderr，避免污染 CLI 的 stdout）
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        if json_format:
            console_handler.setFormatter(JsonFormatter())
        elif sys.stderr.isatty():
            console_handler.setFormatter(ColorFormatter(simple_format))
        else:
            console_handler.setFormatter(logging.Formatter(simple_format))

        logger.addHandler(console_handler)

    # 文件输出
    if log_to_file:
        LOG_DIR.mkdir(exist_ok=True)

        main_log_path = LOG_DIR / f'{name}.log'
        file_handler = RotatingFileHandler(
            main_log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        if json_format:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(detailed_format))

        logger.addHandler(file_handler)

        # 错误日志单独文件
        error_log_path = LOG_DIR / f'{name}_error.log'
        error_handler = RotatingFileHandler(
            error_log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(detailed_format))
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str = 'pinseg') -> logging.Logger:
    """获取已配置的 logger（如果未配置则自动配置）"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logging(
            name,
            level=os.getenv('PINSEG_LOG_LEVEL', 'WARNING'),
            log_to_file=_env_flag('PINSEG_LOG_TO_FILE'),
            json_format=_env_flag('PINSEG_LOG_JSON'),
        )
    return logger


def log_execution_time(logger: Optional[logging.Logger] = None):
    """装饰器：记录函数执行时间"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_engine_logger()

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                elapsed = (time.perf_counter() - start) * 1000
                log.debug(
                    f"{func.__qualname__} 执行完成, 耗时: {elapsed:.2f}ms",
                    extra={'duration_ms': elapsed},
                )
                return result
            except Exception as e:
                elapsed = (time.perf_counter() - start) * 1000
                log.error(
                    f"{func.__qualname__} 执行失败, 耗时: {elapsed:.2f}ms, 错误: {e}",
                    extra={'duration_ms': elapsed},
                )
                raise
        return wrapper
    return decorator


# 预配置的日志器
api_logger = None
engine_logger = None


def get_api_logger() -> logging.Logger:
    """获取 API 日志器"""
    global api_logger
    if api_logger is None:
        api_logger = setup_logging(
            'pinseg.api',
            level=os.getenv('LOG_LEVEL', 'INFO'),
            log_to_file=_env_flag('PINSEG_LOG_TO_FILE'),
            json_format=_env_flag('PINSEG_LOG_JSON'),
        )
    return api_logger


def get_engine_logger() -> logging.Logger:
    """获取切分引擎日志器"""
    global engine_logger
    if engine_logger is None:
        engine_logger = get_logger('pinseg.engine')
    return engine_logger
