"""Worked solutions to course exercises on basics, structs, enums, collections, errors, iterators and traits."""