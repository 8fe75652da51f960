"""
Detection of locally installed CAD applications.
"""

import logging

from cadbridge.models.software import ApplicationDescriptor, DetectionReport
from cadbridge.platforms.base import PlatformStrategy

log = logging.getLogger(__name__)


class SoftwareDetector:
    """Filters the platform catalog down to the applications present right now."""

    def __init__(self, strategy: PlatformStrategy):
        self._strategy = strategy

    def detect(self) -> DetectionReport:
        """
        Checks every catalog candidate and reports the present ones.

        The report is rebuilt on each call. A machine without any CAD software
        yields a successful report with an empty list.
        """
        present: list[ApplicationDescriptor] = []
        for candidate in self._strategy.candidates():
            try:
                found = self._strategy.is_present(candidate)
            except OSError as e:
                log.debug(f"Could not check '{candidate.exec_path}': {e}")
                found = False

            log.debug(
                f"{candidate.name}: {'found' if found else 'not found'} "
                f"({candidate.method}, {candidate.exec_path})"
            )
            if found:
                present.append(candidate.model_copy(update={"detected": True}))

        supported = list(
            dict.fromkeys(ext for software in present for ext in software.extensions)
        )
        log.info(
            f"Detected {len(present)} CAD application(s) on {self._strategy.name}."
        )
        return DetectionReport(
            success=True, software=present, supported_extensions=supported
        )
