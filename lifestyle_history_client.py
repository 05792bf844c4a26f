"""Lifestyle and history API client.

This module defines a small client wrapper around the lifestyle and
medical history REST API.  It uses the ``requests`` library internally
and exposes one method per route:

* :meth:`LifestyleHistoryClient.list_lifestyles` / :meth:`get_lifestyle`
* :meth:`LifestyleHistoryClient.create_lifestyle` /
  :meth:`update_lifestyle` / :meth:`delete_lifestyle`
* the same set for medical histories, plus
  :meth:`LifestyleHistoryClient.delete_medical_histories_for` which
  removes every record of a patient/user pair.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  Create methods
return the identifier assigned by the server, parsed from the
``Location`` header of the response.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LifestyleHistoryClient:
    """Client for the lifestyle and medical history API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/lifeStyleAndHistory",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Mount prefix of the API routers.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and return ``(response, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    detail = exc.response.json().get("detail")
                    message = detail if isinstance(detail, str) else str(detail or "")
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_json(self, path: str) -> Tuple[Any, Optional[Error]]:
        response, error = self._request("GET", path)
        if error:
            return None, error
        return response.json(), None

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._get_json(path)
        if error:
            return [], error
        return data or [], None

    def _create(self, path: str, payload: Dict[str, Any]) -> Tuple[Optional[int], Optional[Error]]:
        response, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        location = response.headers.get("Location", "")
        tail = location.rstrip("/").rsplit("/", 1)[-1]
        if not tail.isdigit():
            logger.warning("Create on %s returned no usable Location header: %r", path, location)
            return None, None
        return int(tail), None

    def _send(self, method: str, path: str, payload: Any | None = None) -> Tuple[bool, Optional[Error]]:
        response, error = self._request(method, path, json_body=payload)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Lifestyle operations
    # ------------------------------------------------------------------
    def list_lifestyles(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/lifeStyle/all")

    def get_lifestyle(self, l_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get_json(f"/lifeStyle/{l_id}")

    def find_lifestyles(self, patient_id: int, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/lifeStyle/patient/{patient_id}/user/{user_id}")

    def create_lifestyle(self, payload: Dict[str, Any]) -> Tuple[Optional[int], Optional[Error]]:
        """Create a lifestyle record and return its ``lID``."""
        return self._create("/lifeStyle", payload)

    def update_lifestyle(self, l_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        return self._send("PUT", f"/lifeStyle/{l_id}", payload)

    def delete_lifestyle(self, l_id: int) -> Tuple[bool, Optional[Error]]:
        return self._send("DELETE", f"/lifeStyle/{l_id}")

    # ------------------------------------------------------------------
    # Medical history operations
    # ------------------------------------------------------------------
    def list_medical_histories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/medicalHistory/all")

    def get_medical_history(self, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get_json(f"/medicalHistory/{record_id}")

    def find_medical_histories(
        self, patient_id: int, user_id: int
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/medicalHistory/patient/{patient_id}/user/{user_id}")

    def create_medical_history(self, payload: Dict[str, Any]) -> Tuple[Optional[int], Optional[Error]]:
        """Create a medical history record and return its ``recordId``."""
        return self._create("/medicalHistory", payload)

    def update_medical_history(self, record_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Merge the clinical fields of ``payload`` into the record.

        Only ``allergies``, ``currentMedication``, ``pastMedication``,
        ``chronicDiseases``, ``injuries`` and ``surgeries`` are applied;
        missing ones are cleared on the server.
        """
        return self._send("PUT", f"/medicalHistory/{record_id}", payload)

    def delete_medical_history(self, record_id: int) -> Tuple[bool, Optional[Error]]:
        return self._send("DELETE", f"/medicalHistory/{record_id}")

    def delete_medical_histories_for(self, patient_id: int, user_id: int) -> Tuple[bool, Optional[Error]]:
        return self._send("DELETE", f"/medicalHistory/patient/{patient_id}/user/{user_id}")
