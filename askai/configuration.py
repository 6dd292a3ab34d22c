# Copyright 2025 Google LLC

# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy
# of the License at

#   http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

"""Environment driven configuration for the Ask AI service."""

import logging
import os
from dataclasses import dataclass

DEFAULT_LOCATION = 'us-central1'
DEFAULT_GEMINI_MODEL = 'gemini-2.5-flash'
DEFAULT_API_BASE_URL = 'https://generativelanguage.googleapis.com/v1beta'
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 3000
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = logging.INFO


@dataclass
class Config:
  google_api_key: str | None
  gcp_project_id: str | None
  gcp_project_location: str
  gemini_model: str
  gemini_api_base_url: str
  request_timeout_seconds: float
  host: str
  port: int


def _parse_port(raw: str | None) -> int:
  if not raw:
    return DEFAULT_PORT
  try:
    return int(raw, 10)
  except ValueError:
    logging.warning('PORT=%r is not an integer, using %s', raw, DEFAULT_PORT)
    return DEFAULT_PORT


def _parse_timeout(raw: str | None) -> float:
  if not raw:
    return DEFAULT_REQUEST_TIMEOUT_SECONDS
  try:
    timeout = float(raw)
  except ValueError:
    timeout = 0.0
  if timeout <= 0:
    logging.warning(
        'AI_REQUEST_TIMEOUT_SECONDS=%r is not a positive number, using %s',
        raw,
        DEFAULT_REQUEST_TIMEOUT_SECONDS,
    )
    return DEFAULT_REQUEST_TIMEOUT_SECONDS
  return timeout


def parse_log_level(raw: str | None) -> int:
  """Returns the logging level named by LOG_LEVEL, defaulting to INFO."""
  if not raw:
    return DEFAULT_LOG_LEVEL
  level = logging.getLevelName(raw.strip().upper())
  if not isinstance(level, int):
    logging.warning('LOG_LEVEL=%r is not a logging level, using INFO', raw)
    return DEFAULT_LOG_LEVEL
  return level


def get_config() -> Config:
  """Reads configuration from environment variables and returns a Config.

  Empty strings are treated the same as unset variables, so that an empty
  `GOOGLE_API_KEY=` line in a .env file does not select the API key backend.
  """
  return Config(
      google_api_key=os.environ.get('GOOGLE_API_KEY') or None,
      gcp_project_id=os.environ.get('GOOGLE_PROJECT_ID') or None,
      gcp_project_location=(
          os.environ.get('GOOGLE_LOCATION') or DEFAULT_LOCATION
      ),
      gemini_model=os.environ.get('GEMINI_MODEL') or DEFAULT_GEMINI_MODEL,
      gemini_api_base_url=(
          os.environ.get('GEMINI_API_BASE_URL') or DEFAULT_API_BASE_URL
      ).rstrip('/'),
      request_timeout_seconds=_parse_timeout(
          os.environ.get('AI_REQUEST_TIMEOUT_SECONDS')
      ),
      host=os.environ.get('HOST') or DEFAULT_HOST,
      port=_parse_port(os.environ.get('PORT')),
  )


def describe(config: Config) -> dict[str, str]:
  """Returns a loggable summary of the configuration without secrets."""
  return {
      'PORT': str(config.port),
      'GOOGLE_PROJECT_ID': 'SET' if config.gcp_project_id else 'NOT SET',
      'GOOGLE_LOCATION': config.gcp_project_location,
      'GOOGLE_API_KEY': (
          'SET (***hidden***)' if config.google_api_key else 'NOT SET'
      ),
  }
