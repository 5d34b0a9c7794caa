# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.
import logging

from ddtrace.propagation.http import HTTPPropagator
from ddtrace.trace import Span, tracer

from lambda_client_context.config import config
from lambda_client_context.constants import ClientContextKey

logger = logging.getLogger(__name__)

propagator = HTTPPropagator()


def _is_context_complete(context):
    return context is not None and bool(context.trace_id) and bool(context.span_id)


def get_current_trace_context():
    """
    Return the context of the active dd-trace-py span, or None when tracing
    is disabled or no span is active.
    """
    if not config.trace_enabled:
        return None

    span = tracer.current_span()
    if not span:
        return None

    logger.debug(
        "found dd trace context: trace_id=%s span_id=%s",
        span.context.trace_id,
        span.context.span_id,
    )
    return span.context


def get_traceparent(trace_context):
    """
    Serialize a dd-trace-py `Context` (or `Span`) into a W3C traceparent value.

    Returns None when there is nothing to propagate, or when the configured
    injection styles (DD_TRACE_PROPAGATION_STYLE_INJECT) leave out
    `tracecontext`.
    """
    if isinstance(trace_context, Span):
        trace_context = trace_context.context
    if not _is_context_complete(trace_context):
        return None

    headers = {}
    propagator.inject(trace_context, headers)
    return headers.get(ClientContextKey.TRACEPARENT) or None


def extract_context_from_lambda_context(lambda_context):
    """
    Extract the trace context from the `client_context` attr of the Lambda
    `context` object of the invoked function.

    Direct invocations carry the propagation headers in the custom section
    of the client context.
    """
    dd_data = None
    client_context = getattr(lambda_context, "client_context", None)
    custom = getattr(client_context, "custom", None)
    if custom:
        dd_data = custom
        if ClientContextKey.LEGACY_DATADOG in custom:
            # Legacy trace propagation dict
            dd_data = custom.get(ClientContextKey.LEGACY_DATADOG)
    return propagator.extract(dd_data)
