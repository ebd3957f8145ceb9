#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2026 Jenkins Navigator Developers
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
#

'''
.. module:: jenkins_navigator.deserializers
    :platform: Unix, Windows
    :synopsis: Translate parsed Jenkins API payloads into entities

Every function takes a parsed JSON tree (``dict``/``list``/``str``/``int``/
``bool``/``None``) and returns one entity, linking children to their parent
before returning. Malformed payloads raise :class:`NodeReadException`.
'''

import logging
import re

from jenkins_navigator.errors import NodeReadException
from jenkins_navigator.objects import ArtifactDescription
from jenkins_navigator.objects import BuildDescription
from jenkins_navigator.objects import BuildInfo
from jenkins_navigator.objects import JobDescription
from jenkins_navigator.objects import JobInfo
from jenkins_navigator.objects import MasterNode

logger = logging.getLogger(__name__)

# Node kinds, one per endpoint
MASTER = 'master'
JOB = 'job'
BUILD = 'build'

INTEGER_RE = re.compile(r'^-?[0-9]+\Z')

LAST_BUILD_KEYS = (
    ('lastBuild', 'last_build'),
    ('lastCompletedBuild', 'last_completed_build'),
    ('lastFailedBuild', 'last_failed_build'),
    ('lastSuccessfulBuild', 'last_successful_build'),
)


def _node_error(what, message):
    return NodeReadException(what, ValueError(message))


def _object(tree, what):
    if not isinstance(tree, dict):
        raise _node_error(what, 'expected a JSON object, got %s'
                          % type(tree).__name__)
    return tree


def _required(obj, key, what):
    if key not in obj:
        raise _node_error(what, 'missing required field %r' % key)
    return obj[key]


def _get_str(obj, key, what, nullable=False):
    value = _required(obj, key, what)
    if value is None and nullable:
        return None
    if not isinstance(value, str):
        raise _node_error(what, 'field %r must be a string, got %r'
                          % (key, value))
    return value


def _get_int(obj, key, what):
    '''Read an integer field.

    JSON integers and decimal digit strings (Jenkins sends build ids
    as strings) are accepted; booleans and floats are not.
    '''
    value = _required(obj, key, what)
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return value
    elif isinstance(value, str) and INTEGER_RE.match(value):
        return int(value)
    raise _node_error(what, 'field %r must be an integer, got %r'
                      % (key, value))


def _get_bool(obj, key, what):
    value = _required(obj, key, what)
    if not isinstance(value, bool):
        raise _node_error(what, 'field %r must be a boolean, got %r'
                          % (key, value))
    return value


def _get_list(obj, key, what):
    value = _required(obj, key, what)
    if not isinstance(value, list):
        raise _node_error(what, 'field %r must be an array, got %r'
                          % (key, value))
    return value


def _optional_str(obj, key, what, null='null'):
    if key not in obj:
        return ''
    value = obj[key]
    if value is None:
        return null
    if not isinstance(value, str):
        raise _node_error(what, 'field %r must be a string, got %r'
                          % (key, value))
    return value


def deserialize_artifact_description(tree):
    what = 'artifact description'
    obj = _object(tree, what)
    # a JSON null display path reads as the string 'null'
    return ArtifactDescription(
        _optional_str(obj, 'displayPath', what),
        _optional_str(obj, 'fileName', what, null=''),
        _optional_str(obj, 'relativePath', what, null=''))


def deserialize_build_description(tree, jenkins):
    what = 'build description'
    obj = _object(tree, what)
    number = _get_int(obj, 'number', what)
    if number < 1:
        raise _node_error(what, 'build number must be positive, got %d'
                          % number)
    return BuildDescription(jenkins,
                            _get_str(obj, '_class', what),
                            number,
                            _get_str(obj, 'url', what))


def deserialize_job_description(tree, jenkins):
    what = 'job description'
    obj = _object(tree, what)
    return JobDescription(jenkins,
                          _get_str(obj, '_class', what),
                          _get_str(obj, 'name', what),
                          _get_str(obj, 'url', what),
                          _get_str(obj, 'color', what))


def deserialize_master_node(tree, jenkins):
    what = 'master node'
    obj = _object(tree, what)
    job_descriptions = [deserialize_job_description(job, jenkins)
                        for job in _get_list(obj, 'jobs', what)]
    master_node = MasterNode(jenkins, job_descriptions)
    for job_description in master_node.job_descriptions:
        job_description.set_parent(master_node)
    return master_node


def deserialize_build_info(tree, jenkins):
    what = 'build info'
    obj = _object(tree, what)
    artifacts = [deserialize_artifact_description(artifact)
                 for artifact in _get_list(obj, 'artifacts', what)]
    build_info = BuildInfo(
        jenkins,
        building=_get_bool(obj, 'building', what),
        result=_get_str(obj, 'result', what, nullable=True),
        display_name=_get_str(obj, 'displayName', what),
        full_display_name=_get_str(obj, 'fullDisplayName', what),
        id=_get_int(obj, 'id', what),
        duration=_get_int(obj, 'duration', what),
        timestamp=_get_int(obj, 'timestamp', what),
        url=_get_str(obj, 'url', what),
        artifacts=artifacts)
    for artifact in build_info.artifacts:
        artifact.set_parent(build_info)
    return build_info


def _find_build(builds, query, what):
    for build in builds:
        if build.number == query.number:
            return build
    raise NodeReadException(
        what, LookupError('Could not find build description with number %d'
                          % query.number))


def deserialize_job_info(tree, jenkins):
    what = 'job info'
    obj = _object(tree, what)
    builds = []
    if 'builds' in obj:
        builds = [deserialize_build_description(build, jenkins)
                  for build in _get_list(obj, 'builds', what)]

    last_builds = {}
    for key, attribute in LAST_BUILD_KEYS:
        # Jenkins sends null for jobs that never reached that state
        if obj.get(key) is None:
            last_builds[attribute] = None
            continue
        query = deserialize_build_description(obj[key], jenkins)
        last_builds[attribute] = _find_build(builds, query, what)

    job_info = JobInfo(
        jenkins,
        name=_get_str(obj, 'name', what),
        full_name=_get_str(obj, 'fullName', what),
        display_name=_get_str(obj, 'displayName', what),
        full_display_name=_get_str(obj, 'fullDisplayName', what),
        description=_get_str(obj, 'description', what, nullable=True),
        url=_get_str(obj, 'url', what),
        builds=builds,
        next_build_number=_get_int(obj, 'nextBuildNumber', what),
        **last_builds)
    for build in job_info.builds:
        build.set_parent(job_info)
    return job_info


def deserialize(kind, tree, jenkins):
    '''Translate the payload of one endpoint.

    :param kind: one of :data:`MASTER`, :data:`JOB` or :data:`BUILD`
    :param tree: parsed JSON payload
    :param jenkins: client the entities navigate with, :class:`Jenkins`
    :returns: :class:`MasterNode`, :class:`JobInfo` or :class:`BuildInfo`
    '''
    logger.debug('Deserializing %s payload', kind)
    if kind == MASTER:
        return deserialize_master_node(tree, jenkins)
    elif kind == JOB:
        return deserialize_job_info(tree, jenkins)
    elif kind == BUILD:
        return deserialize_build_info(tree, jenkins)
    raise ValueError('Unknown node kind: %r' % (kind,))
