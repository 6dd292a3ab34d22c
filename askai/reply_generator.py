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

"""Picks the reply backend at startup and falls back to mock replies.

The backend is chosen once, in this order of preference:

1. the Gemini API, if an API key is configured;
2. Vertex AI, if a project id is configured and the SDK client can be built;
3. canned mock replies otherwise.

Whatever backend is in use, a request that fails upstream still gets a reply:
the mock reply for the requested language is returned and flagged as degraded.
"""

import dataclasses
import enum
import logging
from typing import Protocol

import httpx

from askai import gemini_api
from askai import mock_replies
from askai import vertex
from askai.configuration import Config


class Strategy(enum.Enum):
  """The backend used to generate replies."""

  API_KEY = "gemini-api"
  SDK = "vertex-ai"
  MOCK = "mock"


class ReplyBackend(Protocol):

  async def generate(self, text: str, language: str) -> str | None:
    ...


class MockBackend:
  """Backend returning the canned reply for the language."""

  async def generate(self, text: str, language: str) -> str | None:
    return mock_replies.mock_reply(text, language)


@dataclasses.dataclass(frozen=True)
class GeneratedReply:
  """A reply along with where it came from.

  Attributes:
    text: the reply text, never empty.
    source: the backend that produced the text.
    degraded: True if the configured backend failed and the mock reply was
      used instead.
  """

  text: str
  source: Strategy
  degraded: bool = False


def resolve_strategy(
    api_key_present: bool, project_id_present: bool, sdk_constructible: bool
) -> Strategy:
  """Returns the backend to use for a given set of credentials."""
  if api_key_present:
    return Strategy.API_KEY
  if project_id_present and sdk_constructible:
    return Strategy.SDK
  return Strategy.MOCK


class ReplyGenerator:
  """Generates replies with the backend chosen at construction time."""

  def __init__(self, strategy: Strategy, backend: ReplyBackend) -> None:
    self.strategy = strategy
    self._backend = backend

  @classmethod
  def from_config(
      cls,
      config: Config,
      transport: httpx.AsyncBaseTransport | None = None,
  ) -> "ReplyGenerator":
    """Builds a generator from the configuration.

    The Vertex AI client is only constructed when no API key is configured.
    A client that cannot be constructed downgrades the generator to mock
    replies instead of raising.

    Args:
      config: the service configuration.
      transport: optional HTTP transport for the Gemini API backend.

    Returns:
      The reply generator.
    """
    sdk_client = None
    if not config.google_api_key and config.gcp_project_id:
      sdk_client = vertex.create_client(
          config.gcp_project_id, config.gcp_project_location
      )

    strategy = resolve_strategy(
        api_key_present=bool(config.google_api_key),
        project_id_present=bool(config.gcp_project_id),
        sdk_constructible=bool(sdk_client and sdk_client.ok),
    )

    if strategy is Strategy.API_KEY:
      backend = gemini_api.GeminiApiBackend(
          config.google_api_key,
          base_url=config.gemini_api_base_url,
          timeout=config.request_timeout_seconds,
          transport=transport,
      )
    elif strategy is Strategy.SDK:
      backend = vertex.VertexBackend(
          sdk_client.client,
          model_name=config.gemini_model,
          timeout=config.request_timeout_seconds,
      )
    else:
      if sdk_client is not None:
        logging.warning(
            "Vertex AI is unavailable (%s), using mock replies",
            sdk_client.error,
        )
      backend = MockBackend()

    logging.info("Replies will be generated with: %s", strategy.value)
    return cls(strategy, backend)

  async def generate_reply(self, text: str, language: str) -> GeneratedReply:
    """Generates a reply in the given language.

    Args:
      text: the user's message.
      language: the language to reply in.

    Returns:
      The reply. Upstream failures never raise; they yield the mock reply
      with `degraded` set.
    """
    reply = await self._backend.generate(text, language)
    if reply:
      return GeneratedReply(text=reply, source=self.strategy)

    if self.strategy is not Strategy.MOCK:
      logging.warning(
          "%s backend failed to reply, falling back to a mock reply",
          self.strategy.value,
      )
    return GeneratedReply(
        text=mock_replies.mock_reply(text, language),
        source=Strategy.MOCK,
        degraded=self.strategy is not Strategy.MOCK,
    )
