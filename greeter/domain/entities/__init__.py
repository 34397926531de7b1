from greeter.domain.entities.person import Person
__all__ = [
    "Person",
]
