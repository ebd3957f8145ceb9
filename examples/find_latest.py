#!/usr/bin/env python
'''Find the newest successful artifact of a job matching a file name pattern.

Usage: find_latest.py URL JOB PATTERN
'''

import re
import sys

import jenkins_navigator


def main(url, job_name, pattern):
    artifact_pattern = re.compile(pattern)
    with jenkins_navigator.Jenkins.new_builder().with_path(url).build() as server:
        job_info = server.get_job_info(job_name).result()
        last_success = job_info.last_successful_build
        if last_success is None:
            print("%s has no successful builds" % job_name)
            return 1

        build_info = last_success.get_build_info().result()
        for artifact in build_info.artifacts:
            if artifact_pattern.match(artifact.file_name):
                print("Found %s in %s #%d" % (artifact.file_name, job_name,
                                              last_success.number))
                print("The url is '%s'" % artifact.url)
                return 0

        print("Could not find an artifact matching %s in %s" % (pattern,
                                                                job_name))
        return 1


if __name__ == '__main__':
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(2)
    sys.exit(main(*sys.argv[1:]))
