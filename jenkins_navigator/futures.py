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
.. module:: jenkins_navigator.futures
    :platform: Unix, Windows
    :synopsis: Deferred results of remote fetches

A :class:`Deferred` is a single-assignment handle on a value that a
background worker produces. Handles can be blocked on with
:meth:`Deferred.result`, awaited from a coroutine, or chained::

    >>> server.get_job_info('my_job').map(lambda job: job.last_build)
'''

import asyncio
from concurrent import futures
import logging

logger = logging.getLogger(__name__)


def _transfer(source, target):
    '''Settle ``target`` with the outcome of the finished ``source``.'''
    if target.done():
        return
    try:
        if source.cancelled():
            target.cancel()
        elif source.exception() is not None:
            target.set_exception(source.exception())
        else:
            target.set_result(source.result())
    except futures.InvalidStateError:
        # target was cancelled concurrently
        logger.debug('Dropping result for cancelled handle %r', target)


class Deferred(object):
    '''Handle on the result of a fetch running on a background worker.

    :param future: the ``concurrent.futures.Future`` to wrap; a new pending
                   one is created if omitted
    '''

    def __init__(self, future=None):
        if future is None:
            future = futures.Future()
        self._future = future

    @classmethod
    def submit(cls, executor, fn, *args, **kwargs):
        '''Run ``fn(*args, **kwargs)`` on ``executor``.

        :param executor: a ``concurrent.futures.Executor``
        :returns: handle on the call's outcome, :class:`Deferred`
        '''
        return cls(executor.submit(fn, *args, **kwargs))

    @classmethod
    def completed(cls, value):
        '''Return a handle that is already fulfilled with ``value``.'''
        future = futures.Future()
        future.set_result(value)
        return cls(future)

    @classmethod
    def failed(cls, exception):
        '''Return a handle that has already failed with ``exception``.'''
        future = futures.Future()
        future.set_exception(exception)
        return cls(future)

    @property
    def future(self):
        '''The wrapped ``concurrent.futures.Future``.'''
        return self._future

    def done(self):
        return self._future.done()

    def cancelled(self):
        return self._future.cancelled()

    def cancel(self):
        '''Cancel the handle and every handle chained from it.

        A fetch that is already talking to the server is not interrupted;
        its result is discarded.

        :returns: ``True`` if the handle is now cancelled, ``bool``
        '''
        return self._future.cancel()

    def result(self, timeout=None):
        '''Block until the value is available and return it.

        :param timeout: seconds to wait, ``None`` waits forever
        :returns: the fetched value
        :raises: the error the fetch failed with,
                 ``concurrent.futures.CancelledError`` or
                 ``concurrent.futures.TimeoutError``
        '''
        return self._future.result(timeout)

    def exception(self, timeout=None):
        return self._future.exception(timeout)

    def add_done_callback(self, fn):
        '''Call ``fn(handle)`` once this handle is settled.

        Callbacks run in the order they were added.
        '''
        self._future.add_done_callback(lambda future: fn(self))

    def _chain(self, fn, flatten):
        target = futures.Future()

        def on_done(source):
            if target.done():
                return
            if source.cancelled() or source.exception() is not None:
                _transfer(source, target)
                return
            try:
                value = fn(source.result())
            except Exception as e:
                value = Deferred.failed(e)
            else:
                if not (flatten and isinstance(value, Deferred)):
                    value = Deferred.completed(value)
            value._future.add_done_callback(
                lambda inner: _transfer(inner, target))

        self._future.add_done_callback(on_done)
        return Deferred(target)

    def map(self, fn):
        '''Return a handle on ``fn(value)``.

        Failures and cancellation propagate without calling ``fn``.
        '''
        return self._chain(fn, False)

    def then(self, fn):
        '''Like :meth:`map`, but a :class:`Deferred` returned by ``fn`` is
        waited for, so its value becomes the value of the new handle.
        '''
        return self._chain(fn, True)

    def __await__(self):
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self):
        return '<Deferred %r>' % self._future
