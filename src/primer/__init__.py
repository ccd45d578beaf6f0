"""
Primer: Demonstration Runner for Language Fundamentals

Runs short, ordered demonstration units (console output, declarations,
value vs reference semantics, type conversion) and records what they print.

ARCHITECTURAL GUARANTEE:
------------------------
Units only ever WRITE to a Console.
    - Nothing a unit prints feeds back into another unit
    - Units run in listing order, records keep emission order
    - Rendering (plain text, ANSI, JSON, YAML) happens after recording

The value model (values, coercion, copying) preserves the documented
quirks of the material (typeof null, NaN, truthy "false") on purpose.
"""

__version__ = "0.1.0"
