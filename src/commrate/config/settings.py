"""설정 관리 모듈

YAML 설정 파일을 로드하고 검증하는 기능을 제공합니다.
Pydantic을 사용하여 타입 안전성과 검증을 보장합니다.
"""

import os
from typing import Optional, Dict, Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

from commrate.scoring import GradeSpec

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".commrate.yml"


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class CommrateConfig(BaseModel):
    """전체 실행 설정"""
    repo_path: str = "."
    start_commit: str = "HEAD"
    author: Optional[str] = None
    include_merges: bool = False
    max_commits: Optional[int] = Field(default=None, ge=0)
    show_score: bool = False
    show_classes: bool = False
    grade: Optional[str] = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('grade')
    @classmethod
    def validate_grade(cls, v):
        if v is None:
            return v
        # GradeSpecError는 ValueError이므로 ValidationError로 변환됨
        return str(GradeSpec.parse(v))

    @field_validator('repo_path')
    @classmethod
    def validate_path_exists(cls, v):
        if not os.path.isdir(v):
            logger.warning(f"Repository path does not exist: {v}")
        return v

    def grade_spec(self) -> Optional[GradeSpec]:
        """등급 필터 스펙 반환"""
        if self.grade is None:
            return None
        return GradeSpec.parse(self.grade)

    def merge_cli_overrides(self, overrides: Dict[str, Any]) -> 'CommrateConfig':
        """CLI 인자로 덮어쓴 새 설정 반환 (None 값은 무시)"""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return CommrateConfig(**data)


def load_config(config_path: str) -> CommrateConfig:
    """설정 파일 로드

    Args:
        config_path: 설정 파일 경로

    Returns:
        로드된 설정 객체

    Raises:
        FileNotFoundError: 설정 파일이 존재하지 않는 경우
        ValueError: 설정 파일 형식이 잘못된 경우
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format: {e}")

    if not isinstance(config_data, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    try:
        config = CommrateConfig(**config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config: {e}")

    logger.info(f"Loaded configuration from: {config_path}")
    return config


def get_default_config_path() -> Optional[str]:
    """기본 설정 파일 경로 반환 (없으면 None)"""
    if os.path.exists(DEFAULT_CONFIG_FILE):
        return DEFAULT_CONFIG_FILE
    return None
