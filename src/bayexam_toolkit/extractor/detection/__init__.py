"""
Module: extractor.detection

Purpose:
    Detection subpackage for recognizing the line kinds of an exam dump.
    Every recognizer is a named Rule evaluated in a fixed precedence order.

Key Modules:
    - starts: Question start lines ("1)", "Soru 4:", bullets)
    - options: Option lines, run-on option lines, correct-answer markers
    - markers: Answer lines, explanation annotations, terminators
    - answers: Answer-line remainder resolution
    - text: Shared character classes and clean-up helpers

Used By:
    - extractor.structuring: Segmenter and stage collectors
"""
