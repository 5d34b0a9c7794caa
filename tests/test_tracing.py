import functools
import unittest

import pytest

from ddtrace.trace import Context, tracer

from lambda_client_context.config import config
from lambda_client_context.tracing import (
    extract_context_from_lambda_context,
    get_current_trace_context,
    get_traceparent,
)
from tests.utils import get_mock_context

fake_traceparent = "00-0000000000000000000000000000029a-0000000000000309-01"


def with_trace_propagation_style(style):
    style_list = list(style.split(","))

    def _wrapper(fn):
        @functools.wraps(fn)
        def _wrap(*args, **kwargs):
            from ddtrace.propagation.http import config

            orig_extract = config._propagation_style_extract
            orig_inject = config._propagation_style_inject
            config._propagation_style_extract = style_list
            config._propagation_style_inject = style_list
            try:
                return fn(*args, **kwargs)
            finally:
                config._propagation_style_extract = orig_extract
                config._propagation_style_inject = orig_inject

        return _wrap

    return _wrapper


@pytest.fixture
def reset_config(monkeypatch):
    config._reset()
    yield monkeypatch
    config._reset()


class TestGetTraceparent(unittest.TestCase):
    @with_trace_propagation_style("tracecontext")
    def test_from_context(self):
        context = Context(trace_id=666, span_id=777, sampling_priority=1)

        self.assertEqual(get_traceparent(context), fake_traceparent)

    @with_trace_propagation_style("tracecontext")
    def test_not_sampled(self):
        context = Context(trace_id=666, span_id=777, sampling_priority=0)

        self.assertTrue(get_traceparent(context).endswith("-00"))

    @with_trace_propagation_style("datadog,tracecontext")
    def test_from_span(self):
        with tracer.trace("parentSpan") as span:
            traceparent = get_traceparent(span)

        self.assertIsNotNone(traceparent)
        self.assertIn(f"-{span.span_id:016x}-", traceparent)

    def test_nothing_to_propagate(self):
        self.assertIsNone(get_traceparent(None))
        self.assertIsNone(get_traceparent(Context()))
        self.assertIsNone(get_traceparent(Context(trace_id=666)))

    @with_trace_propagation_style("datadog")
    def test_tracecontext_style_disabled(self):
        context = Context(trace_id=666, span_id=777, sampling_priority=1)

        self.assertIsNone(get_traceparent(context))


def test_get_current_trace_context(reset_config):
    with tracer.trace("parentSpan") as span:
        context = get_current_trace_context()

    assert context.trace_id == span.trace_id
    assert context.span_id == span.span_id


def test_get_current_trace_context_without_span(reset_config):
    assert tracer.current_span() is None
    assert get_current_trace_context() is None


def test_get_current_trace_context_tracing_disabled(reset_config):
    reset_config.setenv("DD_TRACE_ENABLED", "false")

    with tracer.trace("parentSpan"):
        assert get_current_trace_context() is None


class TestExtractContextFromLambdaContext(unittest.TestCase):
    @with_trace_propagation_style("tracecontext")
    def test_w3c_trace_data(self):
        lambda_ctx = get_mock_context(custom={"traceparent": fake_traceparent})

        context = extract_context_from_lambda_context(lambda_ctx)

        self.assertEqual(context.trace_id, 666)
        self.assertEqual(context.span_id, 777)
        self.assertEqual(context.sampling_priority, 1)

    @with_trace_propagation_style("tracecontext")
    def test_legacy_w3c_trace_data(self):
        lambda_ctx = get_mock_context(
            custom={"_datadog": {"traceparent": fake_traceparent}}
        )

        context = extract_context_from_lambda_context(lambda_ctx)

        self.assertEqual(context.trace_id, 666)
        self.assertEqual(context.span_id, 777)

    @with_trace_propagation_style("datadog")
    def test_datadog_trace_data(self):
        lambda_ctx = get_mock_context(
            custom={
                "x-datadog-trace-id": "666",
                "x-datadog-parent-id": "777",
                "x-datadog-sampling-priority": "1",
            }
        )

        context = extract_context_from_lambda_context(lambda_ctx)

        self.assertEqual(context.trace_id, 666)
        self.assertEqual(context.span_id, 777)

    def test_without_client_context(self):
        lambda_ctx = get_mock_context()
        lambda_ctx.client_context = None

        context = extract_context_from_lambda_context(lambda_ctx)

        self.assertIsNone(context.trace_id)

    def test_without_custom(self):
        context = extract_context_from_lambda_context(get_mock_context())

        self.assertIsNone(context.trace_id)
