# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2019 Datadog, Inc.


# Largest client context accepted by the Lambda Invoke API, counted in
# characters of the base64 encoded string.
MAX_CLIENT_CONTEXT_LENGTH = 3583


# Keys of the decoded client context payload
class ClientContextKey(object):
    CUSTOM = "custom"
    TRACEPARENT = "traceparent"
    # Older tracers nest their headers under this key inside "custom"
    LEGACY_DATADOG = "_datadog"


# AWS service and operation names the botocore patch reacts to
class LambdaApi(object):
    SERVICE_NAME = "lambda"
    INVOKE = "Invoke"
