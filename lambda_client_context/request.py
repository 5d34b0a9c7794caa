# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

# InvokeRequest attribute -> Lambda Invoke API parameter
_API_PARAMS = {
    "function_name": "FunctionName",
    "invocation_type": "InvocationType",
    "log_type": "LogType",
    "client_context": "ClientContext",
    "payload": "Payload",
    "qualifier": "Qualifier",
}


@dataclass(frozen=True)
class InvokeRequest:
    """
    Parameters of a Lambda Invoke call.

    Parameters without a dedicated attribute are kept untouched in `extra`,
    so converting from and back to botocore's `api_params` loses nothing.
    """

    function_name: Optional[str] = None
    invocation_type: Optional[str] = None
    log_type: Optional[str] = None
    client_context: Optional[str] = None
    payload: Any = None
    qualifier: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_params(cls, params):
        known = {}
        extra = {}
        api_to_attr = {api: attr for attr, api in _API_PARAMS.items()}
        for key, value in params.items():
            attr = api_to_attr.get(key)
            if attr is None:
                extra[key] = value
            else:
                known[attr] = value
        return cls(extra=extra, **known)

    def to_api_params(self):
        params = dict(self.extra)
        for attr, api in _API_PARAMS.items():
            value = getattr(self, attr)
            if value is not None:
                params[api] = value
        return params

    def with_client_context(self, client_context):
        return replace(self, client_context=client_context)
