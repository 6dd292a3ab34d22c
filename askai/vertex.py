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

"""Replies generated on Vertex AI through the google-genai SDK."""

import asyncio
import dataclasses
import logging
from typing import Any

from google import genai
from google.genai import errors
from google.genai import types

from askai import configuration
from askai.prompts import build_reply_prompt


@dataclasses.dataclass(frozen=True)
class SdkClientResult:
  """The outcome of constructing the Vertex AI client.

  Attributes:
    client: the constructed client, or None if construction failed.
    error: why the client could not be constructed.
  """

  client: genai.Client | None = None
  error: str = ""

  @property
  def ok(self) -> bool:
    return self.client is not None


def create_client(project_id: str, location: str) -> SdkClientResult:
  """Constructs a google-genai client for Vertex AI.

  Args:
    project_id: the Google Cloud project to bill.
    location: the Vertex AI region, e.g. us-central1.

  Returns:
    A result holding either the client or the construction error.
  """
  try:
    client = genai.Client(
        vertexai=True,
        project=project_id,
        location=location,
    )
  except Exception as e:  # pylint: disable=broad-exception-caught
    return SdkClientResult(error=f"{type(e).__name__}: {e}")
  return SdkClientResult(client=client)


def extract_text(response: Any) -> str:
  """Returns the text of the first candidate of a generate_content response.

  Raises:
    ValueError: if the response has no candidates.
    AttributeError, TypeError: if the candidate has no content parts.
  """
  if not response.candidates:
    raise ValueError("response has no candidates")
  parts = response.candidates[0].content.parts
  return "".join(part.text or "" for part in parts).strip()


class VertexBackend:
  """Calls Gemini on Vertex AI with a pre-constructed client."""

  def __init__(
      self,
      client: genai.Client,
      model_name: str = configuration.DEFAULT_GEMINI_MODEL,
      timeout: float = configuration.DEFAULT_REQUEST_TIMEOUT_SECONDS,
  ) -> None:
    self._client = client
    self._model_name = model_name
    self._timeout = timeout

  async def generate(self, text: str, language: str) -> str | None:
    """Generates a reply, or returns None if the call failed."""
    prompt = build_reply_prompt(text, language)
    contents = [
        types.Content(role="user", parts=[types.Part.from_text(text=prompt)])
    ]
    try:
      response = await asyncio.wait_for(
          self._client.aio.models.generate_content(
              model=self._model_name,
              contents=contents,
          ),
          timeout=self._timeout,
      )
      reply = extract_text(response)
    except (errors.APIError, TimeoutError, asyncio.TimeoutError) as e:
      logging.info("Vertex AI call to %s failed: %s", self._model_name, e)
      return None
    except (ValueError, AttributeError, TypeError) as e:
      logging.info("Unexpected Vertex AI response shape: %s", e)
      return None
    except Exception as e:  # pylint: disable=broad-exception-caught
      logging.info("Vertex AI call to %s raised: %s", self._model_name, e)
      return None
    return reply or None
