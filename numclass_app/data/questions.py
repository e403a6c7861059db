"""Built-in question bank."""

from numclass_app.core.models import Question

QUESTIONS: list[Question] = [
    # Complex numbers
    Question("3 + 4i", "complex"),
    Question("-2 + 5i", "complex"),
    Question("1 - 3i", "complex"),
    Question("-4 - 2i", "complex"),
    Question("-1 + 6i", "complex"),
    Question("5 - 4i", "complex"),
    # Imaginary numbers
    Question("2i", "imaginary"),
    Question("-3i", "imaginary"),
    Question("5i", "imaginary"),
    Question("-7i", "imaginary"),
    Question("4i", "imaginary"),
    Question("-6i", "imaginary"),
    # Rational numbers
    Question("1/2", "rational"),
    Question("-3/4", "rational"),
    Question("-5/6", "rational"),
    Question("√0.09", "rational"),
    Question("-9/10", "rational"),
    Question("-13/14", "rational"),
    # Irrational numbers
    Question("π", "irrational"),
    Question("√2", "irrational"),
    Question("√5", "irrational"),
    Question("√23", "irrational"),
    Question("e", "irrational"),
    Question("2π", "irrational"),
    # Integers
    Question("-10", "integer"),
    Question("-8", "integer"),
    Question("-6", "integer"),
    Question("-4", "integer"),
    Question("-2", "integer"),
    Question("-√36", "integer"),
    # Whole numbers
    Question("0", "whole"),
    # Natural numbers
    Question("1", "natural"),
    Question("21", "natural"),
    Question("9", "natural"),
    Question("101", "natural"),
    Question("12", "natural"),
    Question("√25", "natural"),
]
