from automap.mapped import AutoMapped


class Person(AutoMapped):
    '''A value keyed by its name.'''

    def __init__(self, name, age):
        self.name = name
        self.age = age

    def key(self):
        return self.name

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return (self.name, self.age) == (other.name, other.age)

    def __hash__(self):
        return hash((self.name, self.age))

    def __repr__(self):
        return 'Person({!r}, {!r})'.format(self.name, self.age)

    def to_dict(self):
        return {'name': self.name, 'age': self.age}

    @classmethod
    def from_dict(cls, data):
        return cls(data['name'], data['age'])


class Duck:
    '''Has a key() but does not inherit from AutoMapped.'''

    def __init__(self, tag):
        self.tag = tag

    def key(self):
        return self.tag


class Rock:
    pass
