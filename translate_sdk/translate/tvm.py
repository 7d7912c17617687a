"""TVM ecosystem client."""

from __future__ import annotations

from translate_sdk.translate.base import BaseTranslate


class TVMTranslate(BaseTranslate):
    """Client for TVM chains (tron).

    Next-page URLs carry an opaque ``pageKey``.
    """

    ecosystem = "tvm"
