"""Response body decoding for the configured response format."""

import json
import logging
import xml.etree.ElementTree as ET

import phpserialize

from mapmyfitness.exceptions import MalformedResponse
from mapmyfitness.models import ResponseFormat

logger = logging.getLogger(__name__)


def decode(raw_body: str, response_format):
    """Decode a raw response body.

    json gives plain Python values, xml the root ``Element``, php the
    unserialized value (arrays become dicts) and txt the body unchanged.
    """
    fmt = ResponseFormat.parse(response_format)

    if fmt is ResponseFormat.TXT:
        return raw_body

    if fmt is ResponseFormat.JSON:
        try:
            return json.loads(raw_body)
        except ValueError as e:
            logger.error(f"Invalid JSON response: {e}")
            raise MalformedResponse(f"Invalid JSON response: {e}") from e

    if fmt is ResponseFormat.XML:
        try:
            return ET.fromstring(raw_body)
        except ET.ParseError as e:
            logger.error(f"Invalid XML response: {e}")
            raise MalformedResponse(f"Invalid XML response: {e}") from e

    # Serialized PHP objects are refused: no object_hook is given
    data = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body
    try:
        return phpserialize.loads(data, decode_strings=True)
    except ValueError as e:
        logger.error(f"Invalid serialized response: {e}")
        raise MalformedResponse(f"Invalid serialized response: {e}") from e
