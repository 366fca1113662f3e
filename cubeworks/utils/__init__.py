"""A stopwatch timer."""