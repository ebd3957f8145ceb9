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
.. module:: jenkins_navigator.endpoints
    :platform: Unix, Windows
    :synopsis: Jenkins REST endpoints and URL derivation
'''

from urllib.parse import quote, unquote

from jenkins_navigator.errors import IllegalStateException
from jenkins_navigator.errors import JenkinsConfigurationException

# API types
API_TYPE_JSON = 'json'
ACCEPT_TYPES = {
    API_TYPE_JSON: 'application/json',
}

# REST Endpoints
INFO = 'api/%(api_type)s'
JOB_INFO = 'job/%(job_name)s/api/%(api_type)s'
BUILD_INFO = 'job/%(job_name)s/%(number)d/api/%(api_type)s'
ARTIFACT = '%(build_url)s/artifact/%(relative_path)s'


def normalize_api_type(api_type):
    '''Return the lowercase tag of a supported API type.

    :param api_type: API type tag, e.g. ``JSON`` or ``json``, ``str``
    :returns: the tag as inserted into endpoint paths, ``str``
    '''
    if not api_type:
        raise JenkinsConfigurationException('API type must be specified')
    tag = api_type.lower()
    if tag not in ACCEPT_TYPES:
        raise JenkinsConfigurationException(
            'Unimplemented API type: %s' % api_type)
    return tag


def artifact_url(build_url, relative_path):
    '''Build the download URL of an artifact.

    :param build_url: URL of the build owning the artifact, ``str``
    :param relative_path: artifact path relative to the build, ``str``
    :returns: artifact download URL, ``str``
    '''
    return ARTIFACT % {
        'build_url': build_url[:-1] if build_url.endswith('/')
        else build_url,
        'relative_path': relative_path[1:] if relative_path.startswith('/')
        else relative_path,
    }


class JenkinsPathProvider(object):
    '''Canonical base URL of a Jenkins server and the paths derived from it.

    The base path always ends with ``/``.
    '''

    def __init__(self, base_path):
        if base_path is None:
            raise JenkinsConfigurationException(
                'Jenkins path must not be None')
        if not base_path:
            raise JenkinsConfigurationException(
                'Jenkins path must not be empty')
        if base_path[-1] == '/':
            self._base_path = base_path
        else:
            self._base_path = base_path + '/'

    @property
    def base_path(self):
        return self._base_path

    def _build_url(self, format_spec, variables):
        variables = dict(variables)
        variables['api_type'] = normalize_api_type(variables['api_type'])
        if 'job_name' in variables:
            variables['job_name'] = quote(variables['job_name'], safe='')
        return self._base_path + format_spec % variables

    def api_path(self, api_type):
        return self._build_url(INFO, {'api_type': api_type})

    def job_api_path(self, job_name, api_type):
        return self._build_url(JOB_INFO, {'job_name': job_name,
                                          'api_type': api_type})

    def build_api_path(self, job_name, number, api_type):
        return self._build_url(BUILD_INFO, {'job_name': job_name,
                                            'number': number,
                                            'api_type': api_type})

    def job_name_from_build_url(self, build_url):
        '''Extract the job name from the URL of one of its builds.

        Build URLs look like ``{base}job/{name}/{number}/``; the leading
        ``job`` segment may be missing.

        :param build_url: URL of a build, ``str``
        :returns: the (unquoted) job name, ``str``
        :raises: :class:`IllegalStateException` if the URL has another shape
        '''
        path = build_url
        if path.startswith(self._base_path):
            path = path[len(self._base_path):]
        pieces = [piece for piece in path.split('/') if piece]
        if len(pieces) == 3 and pieces[0].lower() == 'job':
            job_name = pieces[1]
        elif len(pieces) == 2:
            job_name = pieces[0]
        else:
            job_name = None
        if job_name is None or not pieces[-1].isdigit():
            raise IllegalStateException(
                'Could not extract job name from URL: %s' % build_url)
        return unquote(job_name)

    def __repr__(self):
        return 'JenkinsPathProvider(%r)' % self._base_path
