# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.

import base64
import binascii

import ujson as json


class ClientContextError(ValueError):
    """The client context is not base64 encoded UTF-8 JSON object text."""


def decode_client_context(encoded):
    """
    Decode the `ClientContext` parameter of a Lambda Invoke call into a dict.

    Raises ClientContextError when the value is not valid base64, not UTF-8,
    not JSON, or does not hold a JSON object at the top level.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError, TypeError) as e:
        raise ClientContextError(f"Unable to decode client context: {e}") from e

    if not isinstance(payload, dict):
        raise ClientContextError(
            f"Client context must hold a JSON object, got {type(payload).__name__}"
        )
    return payload


def encode_client_context(payload):
    """
    Serialize `payload` to compact JSON and base64 encode it.

    Raises ClientContextError when a string in `payload` has no UTF-8 form,
    such as a lone surrogate accepted by the JSON decoder.
    """
    try:
        data = json.dumps(payload, ensure_ascii=False, escape_forward_slashes=False)
        raw = data.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ClientContextError(f"Unable to encode client context: {e}") from e
    return base64.b64encode(raw).decode("ascii")
