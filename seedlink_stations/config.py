# seedlink_stations/config.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# YAML configuration loading
# Durations are in milliseconds in the file, seconds in code

import os
import logging
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from seedlink_stations.endpoint import SEEDLINK_DEFAULT_PORT

logger = logging.getLogger('Config')

class SocketConfig(BaseModel):
    timeout: int = Field(5000, gt=0)  # idle timeout, ms

class Config(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(8086, ge=0, lt=65536)
    refresh_interval: int = Field(300000, ge=0)  # cache TTL, ms
    default_seedlink_port: int = Field(SEEDLINK_DEFAULT_PORT, ge=0, lt=65536)
    max_workers: int = Field(1, ge=1)
    log_level: str = "INFO"
    socket: SocketConfig = Field(default_factory=SocketConfig)

    @property
    def ttl_seconds(self) -> float:
        return self.refresh_interval / 1000.0

    @property
    def timeout_seconds(self) -> float:
        return self.socket.timeout / 1000.0

def load_config(path: Optional[str] = None) -> Config:
    """Load config from YAML; defaults when no file is given or found."""
    if path is None or not os.path.exists(path):
        if path is not None:
            logger.warning(f"[Config] {path} not found, using defaults")
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = Config(**data)
    logger.info(f"[Config] Loaded {path}")
    return config
