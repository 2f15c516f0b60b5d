"""Domain protocols (ports) package.

Usage:
    from problem_details.domain.protocols import LoggerProtocol
"""

from problem_details.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
