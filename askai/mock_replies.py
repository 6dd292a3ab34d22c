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

"""Canned replies used when no Gemini backend is available."""

from typing import Final, Mapping

_MOCK_TEMPLATES: Final[Mapping[str, str]] = {
    "en": (
        'I received your message: "{text}". This is a mock AI response in'
        " English."
    ),
    "es": (
        'Recibí tu mensaje: "{text}". Esta es una respuesta de IA simulada en'
        " español."
    ),
    "fr": (
        "J'ai reçu votre message: \"{text}\". Ceci est une réponse IA simulée"
        " en français."
    ),
    "de": (
        'Ich habe Ihre Nachricht erhalten: "{text}". Dies ist eine simulierte'
        " KI-Antwort auf Deutsch."
    ),
    "it": (
        'Ho ricevuto il tuo messaggio: "{text}". Questa è una risposta AI'
        " simulata in italiano."
    ),
    "pt": (
        'Recebi sua mensagem: "{text}". Esta é uma resposta de IA simulada em'
        " português."
    ),
    "ja": 'メッセージを受け取りました: "{text}". これは日本語のモックAI応答です。',
    "zh": '我收到了您的消息: "{text}". 这是中文的模拟AI回复。',
}
_FALLBACK_TEMPLATE: Final[str] = (
    'I received your message: "{text}". This is a mock AI response.'
    " (Language: {language})"
)

SUPPORTED_LANGUAGES: Final[tuple[str, ...]] = tuple(_MOCK_TEMPLATES)


def mock_reply(text: str, language: str) -> str:
  """Returns the canned reply for a language code.

  Args:
    text: the user's message, quoted verbatim in the reply.
    language: a language code, matched case-insensitively. Unknown codes get
      an English reply that names the code as given.
  """
  template = _MOCK_TEMPLATES.get(language.lower())
  if template is None:
    return _FALLBACK_TEMPLATE.format(text=text, language=language)
  return template.format(text=text)
