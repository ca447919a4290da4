"""Configuration sources producing ConfigNode trees."""

from logtree.adapters.config.xml import parse_xml_file, parse_xml_string

__all__ = ["parse_xml_file", "parse_xml_string"]
