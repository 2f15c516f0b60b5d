"""Domain layer - Problem document model.

This layer contains the status metadata tables, the immutable problem
document and the problem type registry. It has NO dependency on any web
framework; it only builds on ``problem_details.core``.

Structure:
- status_metadata: Titles, slugs and status classification
- problem_document: RFC 9457 problem document
- problem_types: Named problem type registry
- protocols/: Ports implemented by infrastructure adapters
"""
