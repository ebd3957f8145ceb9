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
.. module:: jenkins_navigator.auth
    :platform: Unix, Windows
    :synopsis: Request authentication for the Jenkins navigator
'''

import requests


class Authentication(requests.auth.AuthBase):
    '''Produces the headers that authenticate a request.

    Subclasses implement :meth:`headers`; the transport applies them to
    every request it sends.
    '''

    def headers(self):
        '''Return the authentication headers.

        :returns: header names mapped to values, ``dict``
        '''
        raise NotImplementedError()

    def __call__(self, r):
        r.headers.update(self.headers())
        return r


class BasicAuthentication(Authentication):
    '''HTTP basic authentication.

    Credentials are not validated; empty strings are sent as they are.

    :param username: Server username, ``str``
    :param password: Server password or API token, ``str``
    '''

    def __init__(self, username, password):
        self.username = username
        self.password = password
        self._auth = requests.auth.HTTPBasicAuth(
            username.encode('utf-8'), password.encode('utf-8'))

    def headers(self):
        prepared = requests.PreparedRequest()
        prepared.prepare_headers({})
        self._auth(prepared)
        return dict(prepared.headers)

    def __call__(self, r):
        return self._auth(r)

    def __eq__(self, other):
        return (isinstance(other, BasicAuthentication) and
                self.username == other.username and
                self.password == other.password)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.username, self.password))

    def __repr__(self):
        return 'BasicAuthentication(username=%r)' % self.username
