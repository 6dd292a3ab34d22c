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


def build_reply_prompt(text: str, language: str) -> str:
  """Builds the prompt asking Gemini to reply to a message.

  Args:
    text: the user's message, embedded as is.
    language: the language the reply must be written in.

  Returns:
    The prompt to send to Gemini.
  """
  return f"""
  # Reply Job
  ## Instructions
  You are a helpful assistant. Reply to the message below in the following
  language: {language}. Return only the reply text.
  ## Message
  {text}
  """
