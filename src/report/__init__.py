"""
Report package for Style-Report.

Assembles readability reports from the external tool's output: the data
models, the report surfaces, the static reference text and the orchestrator.
"""
