"""Tests for vertex.py."""

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

import asyncio
import unittest
from unittest.mock import AsyncMock
from unittest.mock import MagicMock
from unittest.mock import patch

from askai import vertex


def _response(*texts):
  part_mocks = [MagicMock(text=text) for text in texts]
  candidate = MagicMock()
  candidate.content.parts = part_mocks
  response = MagicMock()
  response.candidates = [candidate]
  return response


class CreateClientTest(unittest.TestCase):

  @patch("askai.vertex.genai.Client")
  def test_create_client_success(self, mock_client):
    result = vertex.create_client("test-project", "us-central1")

    self.assertTrue(result.ok)
    self.assertIs(result.client, mock_client.return_value)
    mock_client.assert_called_once_with(
        vertexai=True, project="test-project", location="us-central1"
    )

  @patch("askai.vertex.genai.Client")
  def test_create_client_failure(self, mock_client):
    mock_client.side_effect = ValueError("no credentials")

    result = vertex.create_client("test-project", "us-central1")

    self.assertFalse(result.ok)
    self.assertIsNone(result.client)
    self.assertIn("no credentials", result.error)


class VertexBackendTest(unittest.IsolatedAsyncioTestCase):

  def _backend(self, generate_content, timeout=30.0):
    client = MagicMock()
    client.aio.models.generate_content = generate_content
    return vertex.VertexBackend(client, "gemini-test", timeout=timeout)

  async def test_generate_success(self):
    generate_content = AsyncMock(return_value=_response("Hola", " mundo"))

    reply = await self._backend(generate_content).generate("Hello", "es")

    self.assertEqual(reply, "Hola mundo")
    generate_content.assert_awaited_once()
    call_args = generate_content.call_args
    self.assertEqual(call_args.kwargs["model"], "gemini-test")
    contents = call_args.kwargs["contents"]
    self.assertEqual(len(contents), 1)
    self.assertEqual(contents[0].role, "user")
    prompt = contents[0].parts[0].text
    self.assertIn("Hello", prompt)
    self.assertIn("es", prompt)

  async def test_generate_without_candidates(self):
    response = MagicMock()
    response.candidates = []
    generate_content = AsyncMock(return_value=response)

    self.assertIsNone(
        await self._backend(generate_content).generate("Hello", "es")
    )

  async def test_generate_without_content(self):
    candidate = MagicMock()
    candidate.content = None
    response = MagicMock()
    response.candidates = [candidate]
    generate_content = AsyncMock(return_value=response)

    self.assertIsNone(
        await self._backend(generate_content).generate("Hello", "es")
    )

  async def test_generate_empty_text(self):
    generate_content = AsyncMock(return_value=_response(None, ""))

    self.assertIsNone(
        await self._backend(generate_content).generate("Hello", "es")
    )

  async def test_generate_error(self):
    generate_content = AsyncMock(side_effect=RuntimeError("quota exceeded"))

    self.assertIsNone(
        await self._backend(generate_content).generate("Hello", "es")
    )

  async def test_generate_timeout(self):
    async def hang(**kwargs):
      await asyncio.sleep(10)

    reply = await self._backend(hang, timeout=0.01).generate("Hello", "es")

    self.assertIsNone(reply)


if __name__ == "__main__":
  unittest.main()
