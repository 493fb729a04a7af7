"""
Utils package.

Parsing primitives for App Store financial reports:
- `report_analyzer`: delimiter detection, metadata extraction and region location.
- `report_parser`: the column name table and per-row decoding.
- `report_formatting`: display formatting of dates and amounts.
- `parser_config`: tunable scan windows and thresholds.
All monetary values are `decimal.Decimal`; dates stay in the report's own format.
"""
