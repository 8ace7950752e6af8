import os
from dataclasses import dataclass


@dataclass
class SegmenterConfig:
    """切分器配置"""
    normalize_case: bool = True   # 分类前转小写（符号表只有小写）
    warn_on_gap: bool = True      # 无法分类的位置记 WARNING


@dataclass
class ServerConfig:
    """API 服务配置"""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).lower(),
        )


# 默认配置实例
DEFAULT_CONFIG = SegmenterConfig()
