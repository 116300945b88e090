"""OOP katas: abstraction, encapsulation, inheritance and polymorphism."""
