"""Projects API client.

This module defines a small client wrapper around the Projects API.  It
uses the ``requests`` library internally to make HTTP calls and unwraps
the ``body`` envelope the server puts around every successful reply.

The client exposes one method per operation:

* :meth:`ProjectsAPI.list_projects` – return stored records, optionally
  only those for one language.
* :meth:`ProjectsAPI.put_project` – store a project under a name.

Methods never raise on HTTP or network errors.  They return a tuple
``(data, error)`` where ``error`` is ``None`` on success and otherwise a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)


class ProjectsAPI:
    """Client for the Projects API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:9050``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and return the unwrapped ``body``.

        Returns:
            A tuple ``(data, error)``.  On failure ``data`` is ``None``
            and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.JSONDecodeError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "invalid JSON response"}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not isinstance(payload, dict) or "body" not in payload:
            return None, {"status_code": response.status_code, "message": "response has no body"}
        return payload["body"], None

    # ------------------------------------------------------------------
    # Project operations
    # ------------------------------------------------------------------
    def list_projects(
        self, language: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve stored project records.

        Args:
            language: One of ``go``, ``rust``, ``python`` or
                ``typescript``.  When omitted all records are returned.
        Returns:
            A tuple ``(records, error)``.  ``records`` is empty on failure.
        """
        params = {"language": language} if language else None
        data, error = self._request("GET", "/projects", params=params)
        if error:
            return [], error
        return data or [], None

    def put_project(
        self, name: str, language: str, url: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Store a project under ``name``.

        Returns:
            A tuple ``(project, error)``.  ``project`` includes the
            server-set ``added`` timestamp.
        """
        path = f"/projects/{quote(name, safe='')}"
        return self._request("PUT", path, json_body={"language": language, "url": url})
