"""
Encoding of the session-manager-plugin invocation.

The plugin takes two JSON documents whose keys follow the AWS API casing
(SessionId, not sessionId) and six positional arguments in a fixed order.
The payload schemas and the argument layout change independently of each
other, so each carries its own version: PAYLOAD_VERSION is stamped into the
schema ids and ARGUMENTS_VERSION is reported with every plugin launch.
"""

import json

import jsonschema

from .exceptions import SerializationError

PAYLOAD_VERSION = 1
ARGUMENTS_VERSION = 1

START_SESSION_OPERATION = "StartSession"

SESSION_SCHEMA = {
    "$id": f"urn:iecs:session-payload:v{PAYLOAD_VERSION}",
    "type": "object",
    "properties": {
        "SessionId": {"type": "string", "minLength": 1},
        "StreamUrl": {"type": "string", "minLength": 1},
        "TokenValue": {"type": "string", "minLength": 1},
    },
    "required": ["SessionId", "StreamUrl", "TokenValue"],
    "additionalProperties": False,
}

START_SESSION_SCHEMA = {
    "$id": f"urn:iecs:start-session:v{PAYLOAD_VERSION}",
    "type": "object",
    "properties": {
        "DocumentName": {"type": ["string", "null"]},
        "Parameters": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "array", "items": {"type": "string"}},
        },
        "Reason": {"type": ["string", "null"]},
        "Target": {"type": "string", "pattern": "^ecs:.+_.+_.+$"},
    },
    "required": ["DocumentName", "Parameters", "Reason", "Target"],
    "additionalProperties": False,
}


def session_target(cluster_name, task_name, runtime_id):
    return f"ecs:{cluster_name}_{task_name}_{runtime_id}"


def validate(document, schema, label):
    try:
        jsonschema.validate(instance=document, schema=schema)
    except jsonschema.exceptions.ValidationError as e:
        raise SerializationError(
            f"Invalid {label}: {e.message}", stage="session", cause=e
        ) from e


def encode_session(session):
    document = {
        "SessionId": session.session_id,
        "StreamUrl": session.stream_url,
        "TokenValue": session.token_value,
    }
    validate(document, SESSION_SCHEMA, "session payload")
    return json.dumps(document)


def encode_start_session(target, document_name=None, parameters=None, reason=None):
    document = {
        "DocumentName": document_name,
        "Parameters": parameters,
        "Reason": reason,
        "Target": target,
    }
    validate(document, START_SESSION_SCHEMA, "start session request")
    return json.dumps(document)


def ssm_endpoint(region):
    return f"https://ssm.{region}.amazonaws.com"


def plugin_arguments(session_json, region, start_session_json, profile=""):
    """Positional arguments following the plugin executable, in plugin order."""
    return (
        session_json,
        region,
        START_SESSION_OPERATION,
        profile,
        start_session_json,
        ssm_endpoint(region),
    )
