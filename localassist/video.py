"""Video generation request forms, provider catalogue and API key status."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Tuple

_VIDEO_ID_MARKERS = ("video", "motion", "animate", "svd", "zeroscope")


class VideoProvider(str, Enum):
    """A service, or the local machine, that renders videos."""

    BYTEDANCE = "ByteDance"
    ALIBABA = "Alibaba"
    OPENROUTER = "OpenRouter"
    BAIDU = "Baidu"
    TENCENT = "Tencent"
    LOCAL = "Local"


class VideoModel(str, Enum):
    """A video generation model offered by a provider."""

    JIMENG_V2 = "JimengV2"
    JIMENG_V1 = "JimengV1"
    DOUBAO_VIDEO = "DoubaoVideo"
    TONGYI_WANXIANG = "TongyiWanxiang"
    ALI_VGEN = "AliVGen"
    PIKA2 = "Pika2"
    STABLE_VIDEO_DIFFUSION = "StableVideoDiffusion"
    GEN2 = "Gen2"
    ERNIE_VIDEO = "ErnieVideo"
    PADDLE_PADDLE_VIDEO = "PaddlePaddleVideo"
    LOCAL_VIDEO = "LocalVideo"


class VideoQuality(str, Enum):
    """Output quality of a generated video."""

    HD = "HD"


@dataclass
class VideoGenForm:
    """Parameters of a video generation request."""

    prompt: str = "a lovely white cat is playing in the garden"
    negative_prompt: Optional[str] = None
    duration_seconds: int = 5
    width: int = 1024
    height: int = 576
    quality: VideoQuality = VideoQuality.HD
    fps: int = 24
    provider: VideoProvider = VideoProvider.BYTEDANCE
    model: VideoModel = VideoModel.JIMENG_V2
    seed: Optional[int] = None


@dataclass
class VideoProviderInfo:
    """A provider with its display name, models and a short description."""

    provider: VideoProvider
    name: str
    models: List[Tuple[str, VideoModel]] = field(default_factory=list)
    description: str = ""


@dataclass
class ProviderConfigStatus:
    """Whether the API key a provider needs is set in the environment."""

    provider: VideoProvider
    name: str
    is_configured: bool
    env_key: str


@dataclass
class VideoTaskStatus:
    """Progress of a video generation task."""

    task_id: str
    status: str
    progress: int
    video_url: Optional[str] = None
    error: Optional[str] = None


_REMOTE_PROVIDERS = (
    (
        VideoProvider.BYTEDANCE,
        "ByteDance",
        (
            ("Jimeng V2", VideoModel.JIMENG_V2),
            ("Jimeng V1", VideoModel.JIMENG_V1),
            ("Doubao Video", VideoModel.DOUBAO_VIDEO),
        ),
        "Best value, excellent for Chinese content",
    ),
    (
        VideoProvider.ALIBABA,
        "Alibaba",
        (
            ("Tongyi Wanxiang", VideoModel.TONGYI_WANXIANG),
            ("Ali VGen", VideoModel.ALI_VGEN),
        ),
        "Stable and reliable enterprise service",
    ),
    (
        VideoProvider.OPENROUTER,
        "OpenRouter",
        (
            ("Pika 2.0", VideoModel.PIKA2),
            ("Stable Video", VideoModel.STABLE_VIDEO_DIFFUSION),
            ("Gen-2", VideoModel.GEN2),
        ),
        "International models, better for English",
    ),
    (
        VideoProvider.BAIDU,
        "Baidu",
        (
            ("Ernie Video", VideoModel.ERNIE_VIDEO),
            ("Paddle Video", VideoModel.PADDLE_PADDLE_VIDEO),
        ),
        "Mature technology from a leading AI company",
    ),
)

_PROVIDER_ENV_VARS = (
    (VideoProvider.BYTEDANCE, "BYTEDANCE_API_KEY", "字节跳动"),
    (VideoProvider.ALIBABA, "DASHSCOPE_API_KEY", "阿里巴巴"),
    (VideoProvider.OPENROUTER, "OPENROUTER_API_KEY", "OpenRouter"),
    (VideoProvider.BAIDU, "BAIDU_API_KEY", "百度"),
    (VideoProvider.TENCENT, "TENCENT_SECRET_ID", "腾讯"),
)


def is_video_model_id(model_id: str) -> bool:
    """Guess from its id whether a local model generates video."""
    lowered = model_id.lower()
    return any(marker in lowered for marker in _VIDEO_ID_MARKERS)


def available_video_providers(
    local_model_ids: Optional[Iterable[str]] = None,
) -> List[VideoProviderInfo]:
    """Return the remote providers, plus a local one if any local model makes video."""
    providers = [
        VideoProviderInfo(provider=p, name=name, models=list(models), description=desc)
        for p, name, models, desc in _REMOTE_PROVIDERS
    ]
    local_models = [
        (model_id, VideoModel.LOCAL_VIDEO)
        for model_id in (local_model_ids or ())
        if is_video_model_id(model_id)
    ]
    if local_models:
        providers.append(
            VideoProviderInfo(
                provider=VideoProvider.LOCAL,
                name="Local Machine",
                models=local_models,
                description="Run on your own hardware (Requires capable GPU)",
            )
        )
    return providers


def check_video_api_configs(
    environ: Optional[Mapping[str, str]] = None,
) -> List[ProviderConfigStatus]:
    """Report, per provider, whether its API key variable is set."""
    env = os.environ if environ is None else environ
    return [
        ProviderConfigStatus(
            provider=provider,
            name=display_name,
            is_configured=env_var in env,
            env_key=env_var,
        )
        for provider, env_var, display_name in _PROVIDER_ENV_VARS
    ]


def get_video_generation_status(task_id: str) -> VideoTaskStatus:
    """Return the status of a task; tasks are always reported complete."""
    return VideoTaskStatus(task_id=task_id, status="completed", progress=100)