# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging

from traitlets import Enum

import emerge.log
from emerge.args import (
    ConfigBackedParser, LogLevelAction, add_generic_args, add_path_args,
    add_output_args, apply_log_level,
)
from emerge.config import entrypoint_configurables, Global

import pytest


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, isolated_config, reset_log):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert emerge.log.logger.level == logging.ERROR


def test_config_parser_file(entrypoint_config, isolated_config, reset_log):
    isolated_config.join('emerge_config.json').write_text(
        json.dumps({'FixtureConfig': {'log_level': 'CRITICAL'}}),
        encoding='utf-8',
    )
    parser = ConfigBackedParser('test-prog')
    add_generic_args(parser)
    arguments = parser.parse_args([])
    assert arguments.log_level == 'CRITICAL'
    apply_log_level(arguments)
    assert emerge.log.logger.level == logging.CRITICAL


def test_unknown_entrypoint_uses_parser_defaults(isolated_config, reset_log):
    parser = ConfigBackedParser('some-other-prog')
    add_generic_args(parser)
    add_output_args(parser)
    arguments = parser.parse_args([])
    assert arguments.log_level == 'INFO'
    assert arguments.indent is None
    assert arguments.sort_keys is False


def test_path_args():
    parser = ConfigBackedParser('some-other-prog')
    add_path_args(parser)
    assert parser.parse_args([]).path == []
    assert parser.parse_args(['--path', '/a/0/b']).path == ['a', 0, 'b']
    assert parser.parse_args(['-p', 'x']).path == ['x']


def test_sort_keys_flags(isolated_config, reset_log):
    parser = ConfigBackedParser('emerge-merge')
    add_output_args(parser)
    assert parser.parse_args([]).sort_keys is False
    assert parser.parse_args(['--sort-keys']).sort_keys is True


def test_sort_keys_can_be_disabled_over_config(isolated_config, reset_log):
    isolated_config.join('emerge_config.json').write_text(
        json.dumps({'Output': {'sort_keys': True, 'indent': 3}}),
        encoding='utf-8',
    )
    parser = ConfigBackedParser('emerge-merge')
    add_output_args(parser)
    arguments = parser.parse_args([])
    assert arguments.sort_keys is True
    assert arguments.indent == 3
    assert parser.parse_args(['--no-sort-keys']).sort_keys is False
