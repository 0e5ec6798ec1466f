# -*- coding: utf-8 -*-

"""
********************************
loopless.report.tutorial
********************************

The tutorial itself, as an ordered list of sections. Each section is a run of
prose and code blocks; the code blocks are executed top to bottom in one
namespace by ``loopless.report.render``, and whatever they print is shown
under them.

Prose is split into paragraphs on blank lines, and text between backticks is
set as code.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
from collections import namedtuple
from textwrap import dedent


Section = namedtuple("Section", "title blocks")
Prose = namedtuple("Prose", "text")
Code = namedtuple("Code", "source")


def prose(text):
    return Prose(dedent(text).strip())


def code(source):
    return Code(dedent(source).strip("\n"))


TITLE = "Loops you don't have to write"

SECTIONS = [
    Section("Why not just write the loop?", [
        prose("""
            Most of what we do to a table is "the same thing, many times": the same
            conversion on several columns, the same summary for each group, the same
            calculation on every row. A `for` loop can do all of that, but you have to
            get the bookkeeping right yourself (where the results go, which columns,
            which rows) every single time.

            pandas already knows how to repeat an operation over columns, groups and
            rows. The helpers in `loopless.processing` are thin wrappers that make the
            three patterns below read the same way, so the thing you are repeating is
            the only thing you have to write.
        """),
        code("""
            import pandas as pd

            from loopless.data import load_mtcars, load_penguins
            from loopless.processing import (numeric, starts_with, ends_with,
                                             indexed_loop, map_list, map_typed,
                                             mutate_across, summarise_across,
                                             mutate_rowwise, mutate_whole)

            penguins = load_penguins()
            mtcars = load_mtcars()
            print(penguins.head())
        """),
    ]),
    Section("A loop by hand", [
        prose("""
            Here is the baseline. We keep a counter from 1 to the length of the list,
            use it to pull out one element, and combine it with a fixed sentence.
        """),
        code("""
            animals = ["pika", "fox", "octopus"]

            for i in range(1, len(animals) + 1):
                print(f"My favorite animal is the {animals[i - 1]}")
        """),
        prose("""
            Nothing wrong with it, but three of those lines are about the counter, and
            one is about animals. `indexed_loop` is the same loop written once, so it
            can be reused (and given a progress bar with `progress=True`). An empty
            list simply gives an empty result.
        """),
        code("""
            print(indexed_loop(animals, "My favorite animal is the {}"))
            print(indexed_loop([], "My favorite animal is the {}"))
        """),
    ]),
    Section("The same function across many columns", [
        prose("""
            The penguin measurements are in millimetres and grams. To put every
            `_mm` column in centimetres we don't loop over the names; we say which
            columns, and what to do to each value. Columns that aren't selected come
            through untouched, in the same place.
        """),
        code("""
            in_cm = mutate_across(penguins, ends_with("_mm"), lambda x: x / 10)
            print(in_cm.head())
        """),
        prose("""
            The selection can be by name, by type, or by both. `numeric()` picks
            every numeric column, `starts_with("bill")` picks the two bill
            measurements, and selectors combine with `|`, `&` and `~`. Passing
            `names` keeps the originals and adds the results as new columns.
        """),
        code("""
            rounded = mutate_across(penguins, numeric(), lambda x: round(x, -1))
            print(rounded.head(3))

            flagged = mutate_across(penguins, starts_with("bill"), lambda x: x > 40, names="{col}_over_40")
            print(flagged.columns.tolist())
        """),
        prose("""
            So far the function has seen one value at a time, and a grouping column
            wouldn't change that. Pass `vectorised=True` and it sees each group's
            slice of a column instead, so "centre each bill measurement on its
            species' mean" is one line. There is still one row out for every row in,
            and `species` itself is left alone.
        """),
        code("""
            centred = mutate_across(penguins, starts_with("bill"), lambda s: s - s.mean(),
                                    by="species", vectorised=True)
            print(centred[["species", "bill_length_mm", "bill_depth_mm"]].head())
        """),
        prose("""
            Summaries collapse each column instead: one row per species. Watch the
            missing values. One missing bill length makes that species' mean missing,
            unless we ask for missing values to be skipped with `na_rm=True`.
        """),
        code("""
            print(summarise_across(penguins, starts_with("bill"), "mean", by="species"))
            print(summarise_across(penguins, starts_with("bill"), "mean", by="species", na_rm=True))
        """),
        code("""
            print(summarise_across(mtcars, ["mpg", "hp", "wt"], ["mean", "std"], by="cyl"))
        """),
    ]),
    Section("Working within rows", [
        prose("""
            Sometimes the repetition runs the other way: one calculation per row,
            over several columns. This is where it is easy to get a wrong answer
            that looks right. A summary function handed a block of columns does not
            know where the rows are, so it summarises the whole block.
        """),
        code("""
            toy = pd.DataFrame({"col_a": [1, 10], "col_b": [1, 20]})

            print(mutate_whole(toy, "avg", ["col_a", "col_b"], "mean"))
            print(mutate_rowwise(toy, "avg", ["col_a", "col_b"], "mean"))
        """),
        prose("""
            The first answer is 8 on both rows: the mean of 1, 1, 10 and 20. The
            second is what we meant, 1 for the first row and 15 for the second.
            With real data, the row-wise version takes the same selectors as before.
        """),
        code("""
            bills = mutate_rowwise(penguins, "bill_total_mm", starts_with("bill"), "sum", na_rm=True)
            print(bills[["species", "bill_length_mm", "bill_depth_mm", "bill_total_mm"]].head())

            sizes = mutate_rowwise(penguins, "mm_mean", ends_with("_mm"), "mean")
            print(sizes[["species", "mm_mean"]].head())
        """),
    ]),
    Section("Two general purpose maps", [
        prose("""
            Finally, when the thing you are iterating over isn't a table operation at
            all, hand the loop to a map. `map_list` collects whatever comes back;
            `map_typed` insists every result is of one type and gives back a Series,
            so a surprise shows up as an error instead of a strange column. A
            DataFrame is a collection of columns, so both iterate over columns.
        """),
        code("""
            print(map_list([1, 2, 3], lambda x: x * 10))
            print(map_typed(mtcars.drop(columns="model"), lambda col: col.mean(), "float").round(2))
        """),
    ]),
]
