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

"""Ask AI web server."""

import logging
import os
from typing import Annotated

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
import google.cloud.logging
from google.cloud.logging.handlers import CloudLoggingHandler
import uvicorn

from askai import configuration
from askai.models import AskAiRequest, AskAiResponse
from askai.reply_generator import ReplyGenerator

REPLY_SOURCE_HEADER = "X-AI-Reply-Source"
REPLY_DEGRADED_HEADER = "X-AI-Reply-Degraded"

# Variables already set in the environment win over the .env file.
load_dotenv(override=False)

# Set up Google Cloud Logging
if "K_SERVICE" in os.environ:
  client = google.cloud.logging.Client()
  handler = CloudLoggingHandler(client)
  google.cloud.logging.handlers.setup_logging(handler)
else:
  logging.basicConfig(
      level=configuration.parse_log_level(os.environ.get("LOG_LEVEL"))
  )

config = configuration.get_config()
logging.info("Configuration loaded: %s", configuration.describe(config))

reply_generator = ReplyGenerator.from_config(config)


def get_reply_generator() -> ReplyGenerator:
  return reply_generator


router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/ask")
async def ask(
    request: AskAiRequest,
    response: Response,
    generator: Annotated[ReplyGenerator, Depends(get_reply_generator)],
) -> AskAiResponse:
  """Replies to a message in the requested language.

  Args:
    request: the text and the language to reply in.
    response: used to report which backend produced the reply.
    generator: the reply generator.

  Returns:
    The original text and the reply.
  """
  reply = await generator.generate_reply(request.text, request.language)
  response.headers[REPLY_SOURCE_HEADER] = reply.source.value
  response.headers[REPLY_DEGRADED_HEADER] = str(reply.degraded).lower()
  return AskAiResponse(input_text=request.text, ai_reply=reply.text)


def create_app() -> FastAPI:
  app = FastAPI(title="Ask AI")
  app.add_middleware(
      CORSMiddleware,
      allow_origins=["*"],
      allow_credentials=True,
      allow_methods=["*"],
      allow_headers=["*"],
      expose_headers=[REPLY_SOURCE_HEADER, REPLY_DEGRADED_HEADER],
  )
  app.include_router(router)
  return app


app = create_app()


def run() -> None:
  """Starts the server on the configured host and port."""
  logging.info("Starting server on port %s", config.port)
  uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
  run()
