import argparse
import logging
import sys
import time

import yaml

from .config import Config
from .errors import HydroPathError
from .levelpaths import get_levelpaths
from .log_level_set import log_level_set
from .nhd_network import get_tailwaters
from .pathlength import get_pathlength
from .terminal import get_terminal
import hydropath.nhd_io as nhd_io

LOG = logging.getLogger('')

'''
Command line orchestration of level path, basin and path length computations
'''


def _handle_args(argv):
    '''
    Handle command line input argument - filepath of configuration file
    '''
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "-f",
        "--custom-input-file",
        dest="custom_input_file",
        required=True,
        help="Path of a .yaml file containing hydropath configuration parameters.",
    )
    return parser.parse_args(argv)


def _input_handler(args):
    '''
    Read user inputs from configuration file and set logging level

    Arguments
    ---------
    args (argparse.Namespace): Command line input arguments

    Returns
    -------
    (Config): validated configuration
    '''
    with open(args.custom_input_file) as custom_file:
        data = yaml.load(custom_file, Loader=yaml.SafeLoader)

    configuration = Config(**data)

    # configure python logger
    log_level_set(configuration.log_parameters.dict())

    return configuration


def load_segments(network_parameters):
    '''
    Read the segment table and rename its columns to the segment schema.
    '''
    segments = nhd_io.read(
        network_parameters.geo_file_path, network_parameters.layer_string
    )
    return nhd_io.rename_columns(segments, network_parameters.columns.dict())


def run(configuration, segments=None):
    '''
    Compute and write the tables selected in the configuration.

    Arguments
    ---------
    configuration (Config): validated configuration
    segments   (DataFrame): segment table. If None it is read from
                            network_parameters.geo_file_path

    Returns
    -------
    (dict): {table name: path written}
    (dict): {task name: seconds}
    '''
    network_parameters = configuration.network_parameters
    compute_parameters = configuration.compute_parameters
    output_parameters = configuration.output_parameters
    terminal_code = network_parameters.terminal_code

    task_times = {}
    start_time = time.time()
    if segments is None:
        segments = load_segments(network_parameters)
    task_times['read_time'] = time.time() - start_time

    output_folder = output_parameters.output_folder
    output_folder.mkdir(parents=True, exist_ok=True)
    output_format = output_parameters.output_format

    written = {}
    if output_parameters.levelpaths:
        start_time = time.time()
        levelpaths = get_levelpaths(
            segments,
            override_factor=compute_parameters.override_factor,
            status=compute_parameters.status,
            backend=compute_parameters.lookup_backend,
            max_iterations=compute_parameters.max_iterations,
            terminal_code=terminal_code,
        )
        written['levelpaths'] = nhd_io.write(
            levelpaths, output_folder / "levelpaths", output_format
        )
        task_times['levelpath_time'] = time.time() - start_time

    if output_parameters.terminals:
        start_time = time.time()
        outlets = compute_parameters.outlets
        if outlets is None:
            outlets = get_tailwaters(segments, terminal_code)
        terminals = get_terminal(
            segments,
            outlets,
            cpu_pool=compute_parameters.cpu_pool,
            terminal_code=terminal_code,
        )
        written['terminals'] = nhd_io.write(
            terminals, output_folder / "terminals", output_format
        )
        task_times['terminal_time'] = time.time() - start_time

    if output_parameters.pathlength:
        start_time = time.time()
        pathlength = get_pathlength(segments, terminal_code=terminal_code)
        written['pathlength'] = nhd_io.write(
            pathlength, output_folder / "pathlength", output_format
        )
        task_times['pathlength_time'] = time.time() - start_time

    return written, task_times


def _print_timing(task_times):
    total_time = sum(task_times.values()) or 1.0
    print('************ TIMING SUMMARY ************')
    print('----------------------------------------')
    for task, seconds in task_times.items():
        print(
            '{}: {} secs, {} %'.format(
                task.replace('_time', '').replace('_', ' ').capitalize(),
                round(seconds, 2),
                round(seconds / total_time * 100, 2),
            )
        )


def main(argv=None):
    args = _handle_args(argv)
    configuration = _input_handler(args)

    main_start_time = time.time()
    try:
        written, task_times = run(configuration)
    except HydroPathError as e:
        LOG.error("computation aborted: %s", e)
        raise

    for name, path in written.items():
        LOG.info("%s written to %s", name, path)
    LOG.debug("process complete in %s seconds." % (time.time() - main_start_time))

    if configuration.log_parameters.showtiming:
        _print_timing(task_times)

    return written


if __name__ == "__main__":
    main(sys.argv[1:])
