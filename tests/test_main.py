"""Tests for the main application."""

# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

import os
import unittest
import unittest.mock

from fastapi.testclient import TestClient

# Import main with no credentials so that no Gemini client is built at import.
with unittest.mock.patch.dict(os.environ, {}, clear=True):
  from askai import main

from askai.configuration import get_config
from askai.reply_generator import GeneratedReply
from askai.reply_generator import MockBackend
from askai.reply_generator import ReplyGenerator
from askai.reply_generator import Strategy


class MainTest(unittest.TestCase):
  """Test cases for the main application."""

  def setUp(self):
    self.generator = ReplyGenerator(Strategy.MOCK, MockBackend())
    main.app.dependency_overrides[main.get_reply_generator] = (
        lambda: self.generator
    )
    self.addCleanup(main.app.dependency_overrides.clear)
    self.client = TestClient(main.app)

  def test_ask_without_configuration(self):
    """Tests the mock reply when nothing is configured."""
    with unittest.mock.patch.dict(os.environ, {}, clear=True):
      self.generator = ReplyGenerator.from_config(get_config())

    response = self.client.post(
        "/ai/ask", json={"text": "Hello", "language": "es"}
    )

    self.assertEqual(response.status_code, 200)
    self.assertEqual(
        response.json(),
        {
            "inputText": "Hello",
            "aiReply": (
                'Recibí tu mensaje: "Hello". Esta es una respuesta de IA'
                " simulada en español."
            ),
        },
    )
    self.assertEqual(response.headers["X-AI-Reply-Source"], "mock")
    self.assertEqual(response.headers["X-AI-Reply-Degraded"], "false")

  def test_ask_echoes_input_text(self):
    text = '  Ünïcode "quotes" {braces}  '
    response = self.client.post("/ai/ask", json={"text": text, "language": "xx"})

    self.assertEqual(response.status_code, 200)
    data = response.json()
    self.assertEqual(data["inputText"], text)
    self.assertIn("(Language: xx)", data["aiReply"])

  def test_ask_reports_degraded_reply(self):
    self.generator = unittest.mock.MagicMock()
    self.generator.generate_reply = unittest.mock.AsyncMock(
        return_value=GeneratedReply(
            text="fallback", source=Strategy.MOCK, degraded=True
        )
    )

    response = self.client.post(
        "/ai/ask", json={"text": "Hello", "language": "en"}
    )

    self.assertEqual(response.status_code, 200)
    self.assertEqual(response.json()["aiReply"], "fallback")
    self.assertEqual(response.headers["X-AI-Reply-Degraded"], "true")
    self.generator.generate_reply.assert_awaited_once_with("Hello", "en")

  def test_ask_rejects_invalid_input(self):
    """Tests that missing or empty fields are client errors."""
    payloads = [
        {"text": "", "language": "es"},
        {"text": "Hello", "language": ""},
        {"language": "es"},
        {"text": "Hello"},
        {},
    ]
    for payload in payloads:
      with self.subTest(payload=payload):
        response = self.client.post("/ai/ask", json=payload)
        self.assertEqual(response.status_code, 422)

  def test_cors_allows_any_origin(self):
    response = self.client.options(
        "/ai/ask",
        headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "POST",
        },
    )

    self.assertEqual(response.status_code, 200)
    self.assertEqual(
        response.headers["access-control-allow-origin"],
        "http://localhost:8080",
    )
    self.assertEqual(
        response.headers["access-control-allow-credentials"], "true"
    )

  @unittest.mock.patch("askai.main.uvicorn.run")
  def test_run_uses_configured_port(self, mock_run):
    main.run()

    mock_run.assert_called_once_with(
        main.app, host=main.config.host, port=main.config.port
    )


if __name__ == "__main__":
  unittest.main()
