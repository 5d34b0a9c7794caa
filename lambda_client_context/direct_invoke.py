# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.
import logging
from dataclasses import dataclass
from typing import Union

from lambda_client_context.client_context import (
    ClientContextError,
    decode_client_context,
    encode_client_context,
)
from lambda_client_context.constants import ClientContextKey, MAX_CLIENT_CONTEXT_LENGTH
from lambda_client_context.request import InvokeRequest
from lambda_client_context.tracing import get_current_trace_context, get_traceparent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Modified:
    """The request was rewritten to carry the trace context."""

    request: InvokeRequest


class NoChange:
    """The original request must be used as is."""

    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_CHANGE"


NO_CHANGE = NoChange()


def modify_or_add_custom_context_header(
    request: InvokeRequest, trace_context, serializer=get_traceparent
) -> Union[Modified, NoChange]:
    """
    Add the traceparent of `trace_context` to the custom section of the
    request's client context.

    Returns `Modified` with a new request, or `NO_CHANGE` when there is
    nothing to propagate, the existing client context can't be decoded, or
    the result would not fit in MAX_CLIENT_CONTEXT_LENGTH. The input request
    is never mutated.
    """
    traceparent = serializer(trace_context)
    if not traceparent:
        logger.debug("No trace context to propagate in client context")
        return NO_CHANGE

    if request.client_context:
        try:
            payload = decode_client_context(request.client_context)
        except ClientContextError:
            logger.debug(
                "Skipping trace propagation, unable to decode client context",
                exc_info=True,
            )
            return NO_CHANGE
    else:
        payload = {}

    custom = payload.get(ClientContextKey.CUSTOM)
    if not isinstance(custom, dict):
        custom = payload[ClientContextKey.CUSTOM] = {}
    custom[ClientContextKey.TRACEPARENT] = traceparent

    try:
        encoded = encode_client_context(payload)
    except ClientContextError:
        logger.debug(
            "Skipping trace propagation, unable to encode client context",
            exc_info=True,
        )
        return NO_CHANGE
    if len(encoded) >= MAX_CLIENT_CONTEXT_LENGTH:
        logger.debug(
            "Skipping trace propagation, client context would be %s characters "
            "long, limit is %s",
            len(encoded),
            MAX_CLIENT_CONTEXT_LENGTH,
        )
        return NO_CHANGE

    return Modified(request.with_client_context(encoded))


def inject_trace_context_into_invoke_params(
    api_params, trace_context=None, serializer=get_traceparent
):
    """
    Return Lambda Invoke `api_params` carrying the trace context in their
    client context, or `api_params` itself when they can't be modified.

    Uses the active dd-trace-py context when `trace_context` is not given.
    """
    if trace_context is None:
        trace_context = get_current_trace_context()
    if trace_context is None:
        return api_params

    request = InvokeRequest.from_api_params(api_params)
    result = modify_or_add_custom_context_header(request, trace_context, serializer)
    if not result:
        return api_params
    return result.request.to_api_params()
