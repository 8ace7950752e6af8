"""
pinseg FastAPI 服务

提供拼音切分的 RESTful API 接口
"""

import time
import uuid
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pinseg.engine import (
    PinyinSegmenter,
    SegmenterConfig,
    SegmenterError,
    ServerConfig,
    get_api_logger,
)

# 初始化日志
logger = get_api_logger()


# ===== 请求/响应模型 =====

class SplitRequest(BaseModel):
    """切分请求"""
    pinyin: str = Field(..., description="拼音输入，可用撇号分隔")
    keep_case: bool = Field(False, description="不转小写")


class SplitResponse(BaseModel):
    """切分响应"""
    raw_pinyin: str
    tokens: List[str]
    elapsed_ms: float


class BatchRequest(BaseModel):
    """批量切分请求"""
    items: List[str] = Field(..., description="拼音列表", min_length=1, max_length=1000)
    keep_case: bool = Field(False, description="不转小写")


class BatchItem(BaseModel):
    """批量切分中的单项结果"""
    pinyin: str
    tokens: Optional[List[str]] = None
    error: Optional[str] = None


class BatchResponse(BaseModel):
    """批量切分响应"""
    results: List[BatchItem]
    elapsed_ms: float


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info("=" * 50)
    logger.info("pinseg API 服务启动")
    yield
    logger.info("pinseg API 服务已停止")


# ===== FastAPI 应用 =====
app = FastAPI(
    title="pinseg API",
    description="拼音音节切分 API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== 请求日志中间件 =====

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录所有请求的详细日志"""
    request_id = str(uuid.uuid4())[:8]
    start_time = time.perf_counter()

    client_ip = request.client.host if request.client else "unknown"
    method = request.method
    path = request.url.path
    query = str(request.query_params) if request.query_params else ""

    logger.info(
        f"[{request_id}] --> {method} {path} {query} | IP: {client_ip}",
        extra={"request_id": request_id},
    )

    try:
        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code
        log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
        getattr(logger, log_level)(
            f"[{request_id}] <-- {status_code} | {elapsed_ms:.2f}ms",
            extra={"request_id": request_id, "duration_ms": elapsed_ms},
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        return response

    except Exception as e:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.error(
            f"[{request_id}] <-- ERROR | {elapsed_ms:.2f}ms | {type(e).__name__}: {e}",
            extra={"request_id": request_id, "duration_ms": elapsed_ms},
        )
        raise


# ===== API 路由 =====

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    from pinseg import __version__
    return HealthResponse(status="healthy", version=__version__)


@app.post("/split", response_model=SplitResponse)
async def split(request: SplitRequest):
    """切分一个拼音字符串"""
    config = SegmenterConfig(normalize_case=not request.keep_case)
    try:
        result = PinyinSegmenter(request.pinyin, config).segment()
    except SegmenterError as e:
        logger.warning(f"无效请求: pinyin={request.pinyin!r}, error={e}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug(f"切分: '{request.pinyin}' -> {result} | {result.elapsed_ms:.2f}ms")

    return SplitResponse(
        raw_pinyin=result.raw_pinyin,
        tokens=result.tokens,
        elapsed_ms=result.elapsed_ms,
    )


@app.post("/split/batch", response_model=BatchResponse)
async def split_batch(request: BatchRequest):
    """批量切分，单项失败不影响其它项"""
    config = SegmenterConfig(normalize_case=not request.keep_case)
    start = time.perf_counter()
    results = []
    for text in request.items:
        try:
            tokens = PinyinSegmenter(text, config).split()
            results.append(BatchItem(pinyin=text, tokens=tokens))
        except SegmenterError as e:
            results.append(BatchItem(pinyin=text, error=str(e)))
    elapsed = (time.perf_counter() - start) * 1000

    failed = sum(1 for r in results if r.error)
    logger.debug(
        f"批量切分: {len(results)} 项, 失败 {failed} 项 | {elapsed:.2f}ms",
        extra={"duration_ms": elapsed, "extra_data": {"items": len(results), "failed": failed}},
    )

    return BatchResponse(results=results, elapsed_ms=elapsed)


@app.get("/split/simple")
async def simple_split(pinyin: str):
    """简单查询接口"""
    try:
        tokens = PinyinSegmenter(pinyin).split()
    except SegmenterError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"pinyin": pinyin, "tokens": tokens}


# ===== 启动入口 =====

def main():
    import uvicorn

    config = ServerConfig.from_env()

    logger.info(f"启动 pinseg API 服务: http://{config.host}:{config.port}")
    logger.info(f"API 文档: http://{config.host}:{config.port}/docs")
    logger.info(f"日志级别: {config.log_level.upper()}")

    uvicorn.run(
        "pinseg.api.server:app",
        host=config.host,
        port=config.port,
        reload=False,
        workers=1,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
