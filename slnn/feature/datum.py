from collections import namedtuple


# One labeled example: a record of named inputs and a record of named outputs
TrainingDatum = namedtuple('TrainingDatum', ['inputs', 'outputs'])


def training_matrices(schema, data):
    """ Build the training matrices for a network from labeled examples

    Parameters
    ----------
    schema: Schema
        The schema used to encode the examples.

    data: iterable of TrainingDatum
        The labeled examples.

    Returns
    -------
    inputs, targets: numpy.ndarray, shapes=(n, n_inputs), (n, n_outputs)
        Row `i` of each matrix is the encoding of the `i`th example.

    """
    data = list(data)

    if not data:
        raise ValueError("No training data provided")

    inputs = schema.encode_inputs([datum.inputs for datum in data])
    targets = schema.encode_outputs([datum.outputs for datum in data])

    return inputs, targets
