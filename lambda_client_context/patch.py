# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.

import sys
import logging

from wrapt import wrap_function_wrapper as wrap
from wrapt.importer import when_imported

from lambda_client_context.config import config
from lambda_client_context.constants import LambdaApi
from lambda_client_context.direct_invoke import inject_trace_context_into_invoke_params

logger = logging.getLogger(__name__)

_botocore_patched = False


def patch_all():
    """
    Patch botocore so that Lambda Invoke calls carry the trace context.
    """
    if not config.client_context_injection:
        logger.debug("Client context injection is disabled, not patching botocore")
        return
    _ensure_patch_botocore()


def _ensure_patch_botocore():
    """
    `botocore` may not be installed or used,
    but ensure it gets patched if installed and used.
    """
    if "botocore.client" in sys.modules:
        # already imported, patch now
        _patch_botocore(sys.modules["botocore.client"])
    else:
        # patch when imported
        when_imported("botocore.client")(_patch_botocore)


def _patch_botocore(module):
    global _botocore_patched
    if not _botocore_patched:
        _botocore_patched = True
        try:
            wrap(module, "BaseClient._make_api_call", _wrap_make_api_call)
            logger.debug("Patched botocore")
        except Exception:
            logger.debug("Failed to patch botocore", exc_info=True)


def _is_lambda_client(instance):
    try:
        return instance.meta.service_model.service_name == LambdaApi.SERVICE_NAME
    except AttributeError:
        return False


def _wrap_make_api_call(func, instance, args, kwargs):
    """
    Wrap `botocore.client.BaseClient._make_api_call` to inject the trace
    context into the client context of Lambda Invoke calls.
    """
    if len(args) < 2 or args[0] != LambdaApi.INVOKE or not _is_lambda_client(instance):
        return func(*args, **kwargs)

    operation_name, api_params = args[0], args[1]
    try:
        api_params = inject_trace_context_into_invoke_params(api_params)
    except Exception:
        logger.debug(
            "Failed to inject trace context into %s client context",
            operation_name,
            exc_info=True,
        )
    return func(operation_name, api_params, *args[2:], **kwargs)
