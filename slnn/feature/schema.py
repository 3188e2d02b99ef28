import logging
import numbers

import numpy

from slnn.core.config import NetworkConfig
from slnn.core.exception import EncodingTypeError
from slnn.feature.base_feature import BaseFeature, BaseOutput
from slnn.util.matrix import as_matrix, check_shape


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class Schema(object):
    """ Stores the input features and output definitions of a network and
    converts between records and the network's input and output matrices
    """
    def __init__(self, inputs, outputs):
        """ Initialize a schema

        inputs: iterable of features
            Instances of subclasses of
            :class:`slnn.feature.base_feature.BaseFeature`. Their order
            defines the column layout of the encoded inputs.

        outputs: iterable of output definitions
            Instances of subclasses of
            :class:`slnn.feature.base_feature.BaseOutput`, one column each,
            in order.

        """
        self.inputs = self._validate(inputs, BaseFeature, 'inputs')
        self.outputs = self._validate(outputs, BaseOutput, 'outputs')

    def _validate(self, definitions, base_class, var):

        if not numpy.iterable(definitions) or isinstance(definitions, str):
            raise TypeError("`{}` was not iterable".format(var))

        definitions = tuple(definitions)

        for definition in definitions:
            if not isinstance(definition, base_class):
                msg = "{} {!r} was not an instance of {}".format(
                    var, definition, base_class.__name__)
                raise TypeError(msg)

        names = [definition.name for definition in definitions]
        if len(set(names)) != len(names):
            msg = "`{}` list included non-unique names".format(var)
            raise ValueError(msg)

        return definitions

    def __repr__(self):
        return "<Schema n_inputs=%d, n_outputs=%d>" % (
            self.n_inputs, self.n_outputs)

    @property
    def n_inputs(self):
        """ The number of columns of an encoded input
        """
        return sum(feature.size for feature in self.inputs)

    @property
    def n_outputs(self):
        return len(self.outputs)

    @property
    def feature_slices(self):
        """ The column slice of each input feature, in schema order
        """
        j = 0
        slices = []
        for feature in self.inputs:
            slices.append(slice(j, j+feature.size))
            j += feature.size
        return slices

    def make_config(self, n_hidden, n_epochs, learning_rate):
        """ A network configuration sized for this schema
        """
        return NetworkConfig(
            n_input=self.n_inputs, n_hidden=n_hidden,
            n_output=self.n_outputs, n_epochs=n_epochs,
            learning_rate=learning_rate)

    def encode_input(self, record):
        """ Encode a record into a single input row

        Parameters
        ----------
        record: dict
            Maps feature names to values: a bool for binary features, a
            real number for continuous features and a string for
            categorical features. Absent keys and None values are encoded
            with the respective feature's missing value encoding.

        Returns
        -------
        row: numpy.ndarray, shape=(1, n_inputs)

        """
        columns = []

        for feature in self.inputs:
            columns.extend(feature(record.get(feature.name)))

        return numpy.array([columns], dtype=numpy.float64).reshape(
            1, self.n_inputs)

    def encode_inputs(self, records):
        """ Encode a sequence of records into an input matrix with a row
        per record
        """
        rows = [self.encode_input(record) for record in records]

        if not rows:
            return numpy.empty((0, self.n_inputs))

        return numpy.vstack(rows)

    def encode_output(self, record):
        """ The raw values of `record` (0.0 when absent) in output order,
        as a single row. The values must be real numbers; they are not
        checked against the kind or range of the output.
        """
        values = []

        for output in self.outputs:
            value = record.get(output.name, 0.0)
            if not isinstance(value, numbers.Real):
                msg = "Output {} expects a real number but got {!r}"
                raise EncodingTypeError(msg.format(output.name, value))
            values.append(float(value))

        return numpy.array([values], dtype=numpy.float64).reshape(
            1, self.n_outputs)

    def encode_outputs(self, records):
        rows = [self.encode_output(record) for record in records]

        if not rows:
            return numpy.empty((0, self.n_outputs))

        return numpy.vstack(rows)

    def decode(self, output):
        """ Decode the first row of a network output

        Parameters
        ----------
        output: numpy.ndarray, shape=(n_samples, n_outputs)
            The network output; only row 0 is decoded.

        Returns
        -------
        decisions: dict
            Maps output names to decoded values. Outputs which are not
            decodable (binary and categorical) are left out.

        """
        output = as_matrix(output, 'output')
        check_shape(output, cols=self.n_outputs, name='output')

        if output.shape[0] == 0:
            raise ValueError("`output` has no rows to decode")

        return self._decode_row(output[0])

    def decode_rows(self, output):
        """ Decode every row of a network output into a list of dicts
        """
        output = as_matrix(output, 'output')
        check_shape(output, cols=self.n_outputs, name='output')

        return [self._decode_row(row) for row in output]

    def _decode_row(self, row):
        decisions = {}

        for value, definition in zip(row, self.outputs):
            if definition.decodable:
                decisions[definition.name] = float(definition.decode(value))
            else:
                logger.debug("Skipping %s output %s",
                             definition.kind, definition.name)

        return decisions
