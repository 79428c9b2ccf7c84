"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_SOURCE = """\
/**
 * @title Reversing a vector
 * @author Jane Doe
 * @license MIT
 * @tags basics stl
 * @summary Demonstrates reversing
 *   a vector in place.
 *
 * The standard library makes this easy.
 */

#include <Rcpp.h>

// [[Rcpp::export]]
NumericVector rev(NumericVector x) {
    return x;
}

/**
 * Call it from R:
 */

/*** R
rev(1:3)
*/
"""

SAMPLE_MARKUP = """\
---
title: Foo
author: Bar
summary: Baz
license: MIT
---

Body text.
"""


@pytest.fixture(name="sample_source")
def sample_source_fixture():
    return SAMPLE_SOURCE


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_SOURCE.splitlines()


@pytest.fixture(name="sample_markup")
def sample_markup_fixture():
    return SAMPLE_MARKUP
