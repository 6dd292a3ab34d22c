"""The models used with FastAPI for data interchange."""

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

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AskAiRequest(BaseModel):
  """A message to get an AI reply for.

  Attributes:
    text: the user's message.
    language: the language the reply should be written in, either a code
      (e.g. "es") or a free-form name (e.g. "Spanish").
  """

  text: str = Field(min_length=1)
  language: str = Field(min_length=1)


class AskAiResponse(BaseModel):
  """The reply sent back to the client.

  Attributes:
    input_text: the text from the request, unchanged. Sent as `inputText`.
    ai_reply: the generated or mock reply. Sent as `aiReply`.
  """

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  input_text: str
  ai_reply: str = Field(min_length=1)
