# petlist

A singly linked list that behaves like a Python sequence, and a small set of
helpers for keeping a register of pets in one.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The linked list

`petlist.linkedlist.LinkedList` stores elements in linked nodes. It can be
built empty or from any iterable, and supports:

- `len(items)`, iteration, `items[i]`, `items[i] = x`, `del items[i]`,
  `x in items`
- `append(element)` and `insert(index, element)` (any index from `0` to
  `len(items)`)
- `pop(index)`: remove and return the element at `index`
- `clear()`, `is_empty()`
- `index(element)`: position of the element
- `contains_all(other)`: whether every element of an iterable is in the list
- `sublist(start, stop)`: a new list with the elements from `start` up to, not
  including, `stop`
- `clone()`: a shallow copy
- `sort(compare, order)`: in-place sort with a three-way comparison function;
  `order` is `SortOrder.ASCENDING` (the default) or `SortOrder.DESCENDING`
- `filter(predicate)`: a new list with the elements for which the predicate is
  true

```python
from petlist.linkedlist import LinkedList, SortOrder

a, b, c = object(), object(), object()
items = LinkedList([a, b])
items.append(c)
items.insert(0, c)
print(len(items), b in items, items.index(b))   # 4 True 2
items.pop(0)
part = items.sublist(0, 2)
print(items.contains_all(part))                 # True

numbers = LinkedList([3, 1, 2])
numbers.sort(lambda x, y: (x > y) - (x < y), SortOrder.DESCENDING)
print(list(numbers))                            # [3, 2, 1]
print(list(numbers.filter(lambda x: x % 2)))    # [3, 1]
```

Indexes are never negative. Errors are raised as follows:

- `IndexError` for an index outside the list, or `sublist` bounds where
  `start` is not a valid index or `stop` is not after `start` and within the
  length
- `TypeError` for a non-integer index or bound, or a `compare` / `predicate`
  that is not callable
- `ValueError` from `index` when the element is absent, and from `sort` when
  `order` is neither `0` nor `1`

Membership, `index` and `contains_all` compare by identity, not equality: two
equal but distinct objects are different elements.

## Pets

`petlist.pets` defines a `Pet` record with `id`, `name`, `sex` (`'m'` or
`'h'`) and `age`. A name longer than 19 characters, or a `sex` that is not a
single character, raises `ValueError`.

The module also provides these helpers:

- `format_pet(pet)`: one table row
- `format_pets(pets)`: a header, one row per pet (skipping `None`) and a blank
  line
- `is_female(pet)` and `is_puppy(pet)` (younger than two): predicates for
  `LinkedList.filter`
- `compare_by_age(first, second)`: a three-way comparison for
  `LinkedList.sort`

```python
from petlist.linkedlist import LinkedList, SortOrder
from petlist.pets import Pet, compare_by_age, format_pets, is_female

pets = LinkedList([Pet(1, "Rex", "m", 3), Pet(2, "Luna", "h", 1)])
print(format_pets(pets.filter(is_female)), end="")
pets.sort(compare_by_age, SortOrder.DESCENDING)
```

## Demo

`petlist.demo.run_demo(out)` writes a walkthrough of every list operation on a
sample register of pets to a text stream. To print it to standard output, run:

```
petlist-demo
```

or `python -m petlist.demo`.

## What it does not do

The pet register lives only in memory. Nothing is saved to or loaded from a
file, and there is no interactive menu for editing pets.