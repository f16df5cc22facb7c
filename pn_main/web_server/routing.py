"""Path convertors used by the route table."""

from starlette.convertors import Convertor, register_url_convertor


class PathSegmentConvertor(Convertor):
    """A single path segment that may be empty (`/` matches with value "")."""

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        value = str(value)
        if "/" in value:
            raise ValueError("path segment must not contain '/'")
        return value


register_url_convertor("segment", PathSegmentConvertor())
