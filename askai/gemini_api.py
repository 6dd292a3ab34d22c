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

"""Replies generated through the Gemini API with an API key.

The backend discovers which Gemini models the key can use, then tries them in
order until one of them returns text. Discovered model names are kept for the
lifetime of the backend so discovery only happens once per process.
"""

import asyncio
import dataclasses
import logging
from typing import Any, Final, Iterable, Mapping, Sequence

import httpx

from askai import configuration
from askai.prompts import build_reply_prompt

FALLBACK_MODELS: Final[tuple[str, ...]] = (
    "gemini-2.5-flash",
    "gemini-2.0-flash",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
)
_MODEL_FAMILY: Final[str] = "gemini"
_MODEL_PREFIX: Final[str] = "models/"
_GENERATE_METHOD: Final[str] = "generateContent"
_API_KEY_HEADER: Final[str] = "x-goog-api-key"


@dataclasses.dataclass(frozen=True)
class CandidateResult:
  """The outcome of asking a single candidate model for a reply.

  Attributes:
    model: the model that was called.
    text: the generated text; empty unless the call succeeded.
    reason: why the call should be retried with the next model.
  """

  model: str
  text: str = ""
  reason: str = ""

  @property
  def ok(self) -> bool:
    return bool(self.text)

  @classmethod
  def success(cls, model: str, text: str) -> "CandidateResult":
    return cls(model=model, text=text)

  @classmethod
  def retryable(cls, model: str, reason: str) -> "CandidateResult":
    return cls(model=model, reason=reason)


def extract_text(payload: Mapping[str, Any]) -> str:
  """Pulls the generated text out of a generateContent response.

  Args:
    payload: the decoded JSON body.

  Returns:
    The text of all parts of the first candidate, stripped.

  Raises:
    KeyError, IndexError, TypeError: if the payload is not shaped like a
      generateContent response.
  """
  parts = payload["candidates"][0]["content"]["parts"]
  return "".join(part.get("text", "") for part in parts).strip()


def filter_model_names(descriptors: Iterable[Mapping[str, Any]]) -> list[str]:
  """Keeps the Gemini models that can generate content.

  Args:
    descriptors: model descriptors as returned by the models.list call.

  Returns:
    The model ids, without the "models/" prefix, in the order received.
    Descriptors that are not shaped like a model are skipped.
  """
  names = []
  for descriptor in descriptors:
    if not isinstance(descriptor, Mapping):
      continue
    name = descriptor.get("name")
    if not isinstance(name, str):
      continue
    if name.startswith(_MODEL_PREFIX):
      name = name[len(_MODEL_PREFIX):]
    if not name.startswith(_MODEL_FAMILY):
      continue
    methods = descriptor.get("supportedGenerationMethods")
    if methods is not None and (
        not isinstance(methods, list) or _GENERATE_METHOD not in methods
    ):
      continue
    names.append(name)
  return names


class GeminiApiBackend:
  """Calls the Gemini REST API, iterating over candidate models."""

  def __init__(
      self,
      api_key: str,
      base_url: str = configuration.DEFAULT_API_BASE_URL,
      timeout: float = configuration.DEFAULT_REQUEST_TIMEOUT_SECONDS,
      transport: httpx.AsyncBaseTransport | None = None,
  ) -> None:
    self._api_key = api_key
    self._base_url = base_url.rstrip("/")
    self._timeout = timeout
    self._transport = transport
    self._model_cache: list[str] | None = None

  @property
  def cached_models(self) -> Sequence[str] | None:
    return self._model_cache

  def _http_client(self) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={_API_KEY_HEADER: self._api_key},
        timeout=self._timeout,
        transport=self._transport,
    )

  async def discover_models(self, client: httpx.AsyncClient) -> list[str]:
    """Lists the Gemini models available to the API key.

    Args:
      client: the HTTP client to use.

    Returns:
      The usable model ids, or an empty list if the call failed.
    """
    try:
      response = await asyncio.wait_for(
          client.get(f"{self._base_url}/models", params={"pageSize": 1000}),
          timeout=self._timeout,
      )
      response.raise_for_status()
      models = filter_model_names(response.json().get("models") or [])
    except (
        httpx.HTTPError,
        TimeoutError,
        asyncio.TimeoutError,
        ValueError,
        TypeError,
        AttributeError,
    ) as e:
      logging.info("Gemini model discovery failed: %s", e)
      return []
    logging.info("Discovered %d Gemini models", len(models))
    return models

  async def candidate_models(self, client: httpx.AsyncClient) -> list[str]:
    """Returns the models to try, in order.

    Uses the cached discovery result when there is one. Otherwise runs
    discovery, caching a non-empty result, and falls back to the fixed model
    list if nothing usable was found.
    """
    if self._model_cache:
      return self._model_cache
    models = await self.discover_models(client)
    if models:
      self._model_cache = models
      return models
    return list(FALLBACK_MODELS)

  async def generate_with_model(
      self, client: httpx.AsyncClient, model: str, prompt: str
  ) -> CandidateResult:
    """Asks one model for a reply.

    Args:
      client: the HTTP client to use.
      model: the model id, e.g. gemini-2.5-flash.
      prompt: the prompt to send.

    Returns:
      A successful result with the generated text, or a retryable result
      describing what went wrong.
    """
    payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
    try:
      response = await asyncio.wait_for(
          client.post(
              f"{self._base_url}/models/{model}:{_GENERATE_METHOD}",
              json=payload,
          ),
          timeout=self._timeout,
      )
    except (TimeoutError, asyncio.TimeoutError):
      return CandidateResult.retryable(
          model, f"no reply within {self._timeout}s"
      )
    except httpx.HTTPError as e:
      return CandidateResult.retryable(model, f"{type(e).__name__}: {e}")
    if not response.is_success:
      return CandidateResult.retryable(model, f"HTTP {response.status_code}")
    try:
      text = extract_text(response.json())
    except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
      return CandidateResult.retryable(model, f"malformed response: {e!r}")
    if not text:
      return CandidateResult.retryable(model, "empty response text")
    return CandidateResult.success(model, text)

  async def generate(self, text: str, language: str) -> str | None:
    """Generates a reply, or returns None if every candidate model failed."""
    prompt = build_reply_prompt(text, language)
    async with self._http_client() as client:
      for model in await self.candidate_models(client):
        result = await self.generate_with_model(client, model, prompt)
        if result.ok:
          logging.info("Gemini API reply generated with %s", result.model)
          return result.text
        logging.info("Gemini model %s failed: %s", model, result.reason)
    return None
