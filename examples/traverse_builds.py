#!/usr/bin/env python
'''Walk the jobs of a server down to the artifacts of every listed build.

Usage: traverse_builds.py URL [MAX_JOBS]
'''

import sys

import jenkins_navigator


def main(url, max_jobs=20):
    with jenkins_navigator.Jenkins.new_builder().with_path(url).build() as server:
        print("- Getting master node")
        master_node = server.get_master_node().result()
        job_descriptions = master_node.job_descriptions[-max_jobs:]
        print("-- Found %d job descriptions" % len(job_descriptions))

        for job_description in job_descriptions:
            print("--- Job '%s'" % job_description.name)
            try:
                job_info = job_description.get_job_info().result()
            except jenkins_navigator.NodeReadException as e:
                print("---- Could not read job: %s" % e)
                continue
            print("---- Found %d build descriptions" % len(job_info.builds))

            # fetch the builds of a job concurrently
            pending = [build.get_build_info() for build in job_info.builds]
            for build_description, handle in zip(job_info.builds, pending):
                print("----- Build #%d" % build_description.number)
                try:
                    build_info = handle.result()
                except jenkins_navigator.NodeReadException as e:
                    print("------ Could not read build: %s" % e)
                    continue
                for artifact in build_info.artifacts:
                    print("------- %s" % artifact.file_name)
    return 0


if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        print(__doc__)
        sys.exit(2)
    sys.exit(main(sys.argv[1], *[int(arg) for arg in sys.argv[2:]]))
