"""Built-in endpoint catalog and parameter routing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paritypack.catalog.exceptions import MissingParameterError, UnknownEndpointError
from paritypack.catalog.models import Endpoint, ParamSpec

PARAMS: dict[str, ParamSpec] = {
    "name": ParamSpec(
        name="name",
        label="Label Name",
        required=True,
        help_text="Descriptive label name.",
    ),
    "labelListVisibility": ParamSpec(
        name="labelListVisibility",
        type="enum",
        label="Sidebar Visibility",
        default="labelShow",
        options=("labelShow", "labelShowIfUnread", "labelHide"),
    ),
    "messageListVisibility": ParamSpec(
        name="messageListVisibility",
        type="enum",
        label="Message List Visibility",
        default="show",
        options=("show", "hide"),
    ),
    "q": ParamSpec(name="q", type="search", label="Search Query"),
    "id": ParamSpec(
        name="id",
        type="id",
        label="ID",
        required=True,
        help_text="Use a list endpoint first to find the ID you need.",
    ),
    "labelIds": ParamSpec(name="labelIds", type="array", label="Label IDs"),
    "addLabelIds": ParamSpec(name="addLabelIds", type="array", label="Labels to Add"),
    "removeLabelIds": ParamSpec(name="removeLabelIds", type="array", label="Labels to Remove"),
    "maxResults": ParamSpec(
        name="maxResults",
        type="number",
        label="Maximum Results",
        default=100,
        help_text="Number of results to return (1-500).",
    ),
    "to": ParamSpec(name="to", type="email", label="Recipient", required=True),
    "subject": ParamSpec(name="subject", label="Subject", required=True),
    "body": ParamSpec(name="body", type="textarea", label="Message Body", required=True),
}


def _params(*names: str) -> tuple[ParamSpec, ...]:
    return tuple(PARAMS[name] for name in names)


def _endpoint(
    endpoint_id: str,
    name: str,
    resource: str,
    method: str,
    path: str,
    params: tuple[ParamSpec, ...],
    docs: str,
) -> Endpoint:
    return Endpoint(
        id=endpoint_id,
        name=name,
        resource=resource,
        method=method,
        path=path,
        params=params,
        docs=docs,
    )


_MODIFY = ("id", "addLabelIds", "removeLabelIds")
_COMPOSE = ("to", "subject", "body")

BUILTIN_ENDPOINTS: tuple[Endpoint, ...] = (
    _endpoint("list-labels", "List Labels", "labels", "GET", "/users/me/labels", (),
              "Lists all labels in the mailbox."),
    _endpoint("get-label", "Get Label", "labels", "GET", "/users/me/labels/{id}", _params("id"),
              "Gets one label with its visibility settings."),
    _endpoint("create-label", "Create Label", "labels", "POST", "/users/me/labels",
              _params("name", "labelListVisibility", "messageListVisibility"),
              "Creates a label."),
    _endpoint("update-label", "Update Label", "labels", "PATCH", "/users/me/labels/{id}",
              (PARAMS["id"], PARAMS["name"].named("name", required=False)),
              "Updates the name of an existing label."),
    _endpoint("delete-label", "Delete Label", "labels", "DELETE", "/users/me/labels/{id}",
              _params("id"), "Permanently deletes a label."),
    _endpoint("list-threads", "List Threads", "threads", "GET", "/users/me/threads",
              _params("q", "labelIds", "maxResults"), "Lists conversation threads."),
    _endpoint("get-thread", "Get Thread", "threads", "GET", "/users/me/threads/{id}",
              _params("id"), "Gets a thread with all of its messages."),
    _endpoint("modify-thread", "Modify Thread", "threads", "POST",
              "/users/me/threads/{id}/modify", _params(*_MODIFY),
              "Modifies the labels on a thread."),
    _endpoint("trash-thread", "Trash Thread", "threads", "POST", "/users/me/threads/{id}/trash",
              _params("id"), "Moves a thread to trash."),
    _endpoint("delete-thread", "Delete Thread", "threads", "DELETE", "/users/me/threads/{id}",
              _params("id"), "Permanently deletes a thread."),
    _endpoint("list-messages", "List Messages", "messages", "GET", "/users/me/messages",
              _params("q", "labelIds", "maxResults"), "Lists messages in the mailbox."),
    _endpoint("get-message", "Get Message", "messages", "GET", "/users/me/messages/{id}",
              _params("id"), "Gets a message with full details."),
    _endpoint("modify-message", "Modify Message", "messages", "POST",
              "/users/me/messages/{id}/modify", _params(*_MODIFY),
              "Modifies the labels on a message."),
    _endpoint("trash-message", "Trash Message", "messages", "POST",
              "/users/me/messages/{id}/trash", _params("id"), "Moves a message to trash."),
    _endpoint("delete-message", "Delete Message", "messages", "DELETE",
              "/users/me/messages/{id}", _params("id"), "Permanently deletes a message."),
    _endpoint("send-message", "Send Message", "messages", "POST", "/users/me/messages/send",
              _params(*_COMPOSE), "Sends a message, encoded as base64url RFC 2822."),
    _endpoint("list-drafts", "List Drafts", "drafts", "GET", "/users/me/drafts",
              _params("maxResults"), "Lists drafts."),
    _endpoint("get-draft", "Get Draft", "drafts", "GET", "/users/me/drafts/{id}",
              _params("id"), "Gets a draft including its message."),
    _endpoint("create-draft", "Create Draft", "drafts", "POST", "/users/me/drafts",
              _params(*_COMPOSE), "Creates a draft."),
    _endpoint("update-draft", "Update Draft", "drafts", "PUT", "/users/me/drafts/{id}",
              _params("id", *_COMPOSE), "Replaces the content of a draft."),
    _endpoint("send-draft", "Send Draft", "drafts", "POST", "/users/me/drafts/send",
              _params("id"), "Sends an existing draft."),
)

_ENDPOINTS_BY_ID: dict[str, Endpoint] = {endpoint.id: endpoint for endpoint in BUILTIN_ENDPOINTS}


def list_endpoint_ids() -> list[str]:
    return [endpoint.id for endpoint in BUILTIN_ENDPOINTS]


def get_endpoint(endpoint_id: str) -> Endpoint:
    try:
        return _ENDPOINTS_BY_ID[endpoint_id]
    except KeyError as error:
        raise UnknownEndpointError(
            f"Unknown endpoint: {endpoint_id}. Available: {', '.join(list_endpoint_ids())}"
        ) from error


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def missing_required_params(endpoint: Endpoint, values: Mapping[str, Any]) -> list[str]:
    return [
        param.name
        for param in endpoint.params
        if param.required and _is_empty(values.get(param.name))
    ]


def split_params(
    endpoint: Endpoint,
    values: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    """Route supplied values into path, query and body maps.

    A param goes to the path when the template names it, to the query string
    for GET endpoints, and to the body otherwise. Empty values are dropped.
    """
    missing = missing_required_params(endpoint, values)
    if missing:
        raise MissingParameterError(endpoint.id, missing)

    path_params: dict[str, Any] = {}
    query_params: dict[str, Any] = {}
    body_params: dict[str, Any] = {}
    for param in endpoint.params:
        value = values.get(param.name)
        if _is_empty(value):
            continue
        value = param.coerce(value)
        if "{" + param.name + "}" in endpoint.path:
            path_params[param.name] = value
        elif endpoint.method == "GET":
            query_params[param.name] = value
        else:
            body_params[param.name] = value
    return path_params, query_params, body_params
