# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from pytest import fixture

import emerge.config


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory, without picking up user config files."""
    monkeypatch.setattr(emerge.config, 'jupyter_config_path', lambda: [])
    with tmpdir.as_cwd():
        yield tmpdir


@fixture
def json_files(tmpdir):
    """Fixture writing json documents to a temporary directory.

    Returns a function taking name=document keyword arguments,
    which returns a dict of the filenames written.
    """
    def write(**documents):
        filenames = {}
        for name, doc in documents.items():
            fn = os.path.join(str(tmpdir), name + '.json')
            with io.open(fn, 'w', encoding='utf8') as f:
                json.dump(doc, f)
            filenames[name] = fn
        return filenames
    return write
