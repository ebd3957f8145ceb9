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
.. module:: jenkins_navigator.objects
    :platform: Unix, Windows
    :synopsis: Navigable view of a Jenkins server

The master node lists job descriptions, a job description resolves to job
information listing build descriptions, and a build description resolves to
build information listing artifacts::

    >>> master = server.get_master_node().result()
    >>> job = master.job_descriptions[0].get_job_info().result()
    >>> build = job.last_successful_build.get_build_info().result()
    >>> print(build.artifacts[0].url)

Parent links are set once, when the graph is built.
'''

import logging

from jenkins_navigator.endpoints import artifact_url
from jenkins_navigator.errors import IllegalStateException
from jenkins_navigator.futures import Deferred

logger = logging.getLogger(__name__)


class NodeChild(object):
    '''An entity with a write-once back-reference to its parent.'''

    _parent = None

    @property
    def parent(self):
        '''The parent entity, or ``None`` if it has not been linked.'''
        return self._parent

    def set_parent(self, parent):
        if parent is None:
            raise ValueError('Parent may not be None')
        if self._parent is not None:
            raise IllegalStateException('Cannot re-set node parent')
        self._parent = parent

    def get_parent(self):
        '''Return a handle on the parent entity.'''
        return Deferred.completed(self._parent)


class MasterNode(object):
    '''Top-level view of the server.

    :param jenkins: client the node was read with, :class:`Jenkins`
    :param job_descriptions: jobs listed by the server, ``list``
    '''

    def __init__(self, jenkins, job_descriptions):
        self.jenkins = jenkins
        self.job_descriptions = tuple(job_descriptions)

    @property
    def url(self):
        return self.jenkins.path_provider.base_path

    def get_job_info(self, job_name):
        return self.jenkins.get_job_info(job_name)

    def __repr__(self):
        return 'MasterNode(url=%r, jobs=%d)' % (self.url,
                                                len(self.job_descriptions))


class JobDescription(NodeChild):
    '''A job as listed by the master node.'''

    def __init__(self, jenkins, jenkins_class, name, url, color):
        self.jenkins = jenkins
        self.jenkins_class = jenkins_class
        self.name = name
        self.url = url
        self.color = color

    def get_job_info(self):
        '''Fetch the full information of this job.

        :returns: handle on the job information, :class:`Deferred`
        '''
        def adopt(job_info):
            if self._parent is not None:
                job_info.set_parent(self._parent)
            return job_info
        return self.jenkins.get_job_info(self.name).map(adopt)

    def __repr__(self):
        return ('JobDescription(jenkins_class=%r, name=%r, url=%r, color=%r)'
                % (self.jenkins_class, self.name, self.url, self.color))


class JobInfo(NodeChild):
    '''Full information of a job.

    The ``last_*`` attributes are either ``None`` or members of ``builds``.
    '''

    def __init__(self, jenkins, name, full_name, display_name,
                 full_display_name, description, url, builds,
                 last_build=None, last_completed_build=None,
                 last_failed_build=None, last_successful_build=None,
                 next_build_number=None):
        self.jenkins = jenkins
        self.name = name
        self.full_name = full_name
        self.display_name = display_name
        self.full_display_name = full_display_name
        self.description = description
        self.url = url
        self.builds = tuple(builds)
        self.last_build = last_build
        self.last_completed_build = last_completed_build
        self.last_failed_build = last_failed_build
        self.last_successful_build = last_successful_build
        self.next_build_number = next_build_number

    def get_parent(self):
        '''Return a handle on the master node.

        A job that was not reached through the master node fetches it.
        '''
        if self._parent is not None:
            return Deferred.completed(self._parent)
        return self.jenkins.get_master_node()

    def get_build_info(self, number):
        '''Fetch information on one build of this job.

        :param number: Build number, ``int``
        :returns: handle on the build information, :class:`Deferred`
        '''
        def adopt(build_info):
            build_info.set_parent(self)
            return build_info
        return self.jenkins.get_build_info(self.name, number).map(adopt)

    def __repr__(self):
        return 'JobInfo(name=%r, url=%r, builds=%d)' % (self.name, self.url,
                                                        len(self.builds))


class BuildDescription(NodeChild):
    '''A build as listed by its job.'''

    def __init__(self, jenkins, jenkins_class, number, url):
        self.jenkins = jenkins
        self.jenkins_class = jenkins_class
        self.number = number
        self.url = url

    def get_build_info(self):
        '''Fetch the full information of this build.

        Without a parent job the job name is taken from the build url.

        :returns: handle on the build information, :class:`Deferred`
        '''
        job_info = self._parent
        if job_info is not None:
            return job_info.get_build_info(self.number)
        job_name = self.jenkins.path_provider.job_name_from_build_url(
            self.url)
        return self.jenkins.get_build_info(job_name, self.number)

    def __repr__(self):
        return 'BuildDescription(jenkins_class=%r, number=%r, url=%r)' % (
            self.jenkins_class, self.number, self.url)


class BuildInfo(NodeChild):
    '''Full information of a build.

    ``duration`` is in milliseconds and ``timestamp`` in milliseconds since
    the epoch. ``result`` is ``None`` while the build is running.
    '''

    def __init__(self, jenkins, building, result, display_name,
                 full_display_name, id, duration, timestamp, url, artifacts):
        self.jenkins = jenkins
        self.building = building
        self.result = result
        self.display_name = display_name
        self.full_display_name = full_display_name
        self.id = id
        self.duration = duration
        self.timestamp = timestamp
        self.url = url
        self.artifacts = tuple(artifacts)

    def get_parent(self):
        '''Return a handle on the job this build belongs to.

        If the build was fetched directly, the job is looked up by the name
        found in the build url.

        :raises: :class:`IllegalStateException` if the url does not name a
                 job
        '''
        if self._parent is not None:
            return Deferred.completed(self._parent)
        job_name = self.jenkins.path_provider.job_name_from_build_url(
            self.url)
        logger.debug('Resolving parent of build %s as job[%s]',
                     self.url, job_name)
        return self.jenkins.get_job_info(job_name)

    def _key(self):
        return (self.building, self.result, self.display_name,
                self.full_display_name, self.id, self.duration,
                self.timestamp, self.url, self.artifacts)

    def __eq__(self, other):
        if not isinstance(other, BuildInfo):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return ('BuildInfo(full_display_name=%r, building=%r, result=%r, '
                'url=%r, artifacts=%d)' % (self.full_display_name,
                                           self.building, self.result,
                                           self.url, len(self.artifacts)))


class ArtifactDescription(NodeChild):
    '''A file archived by a build.'''

    def __init__(self, display_path, file_name, relative_path):
        self.display_path = display_path
        self.file_name = file_name
        self.relative_path = relative_path

    @property
    def url(self):
        '''Download URL of the artifact.'''
        if self._parent is None:
            raise IllegalStateException(
                'Artifact %s is not attached to a build' % self.relative_path)
        return artifact_url(self._parent.url, self.relative_path)

    def _key(self):
        return (self.display_path, self.file_name, self.relative_path)

    def __eq__(self, other):
        if not isinstance(other, ArtifactDescription):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return ('ArtifactDescription(display_path=%r, file_name=%r, '
                'relative_path=%r)' % self._key())
