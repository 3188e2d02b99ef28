import unittest

import numpy as np

from slnn.feature.datum import TrainingDatum, training_matrices
from slnn.feature.provided import (
    BinaryFeature, ContinuousFeature, ContinuousOutput, ProbabilityOutput)
from slnn.feature.schema import Schema
from slnn.neural_network import NeuralNetwork


class TestTrainingMatrices(unittest.TestCase):

    def setUp(self):
        self.schema = Schema(
            inputs=[BinaryFeature('a'), BinaryFeature('b')],
            outputs=[ProbabilityOutput('xor')])

        self.data = [
            TrainingDatum({'a': False, 'b': False}, {'xor': 0.}),
            TrainingDatum({'a': False, 'b': True}, {'xor': 1.}),
            TrainingDatum({'a': True, 'b': False}, {'xor': 1.}),
            TrainingDatum({'a': True, 'b': True}, {}),
        ]

    def test_matrices(self):
        inputs, targets = training_matrices(self.schema, self.data)

        self.assertEqual(inputs.shape, (4, 2))
        self.assertEqual(targets.shape, (4, 1))
        self.assertTrue(
            (inputs == [[0., 0.], [0., 1.], [1., 0.], [1., 1.]]).all())
        self.assertTrue((targets.ravel() == [0., 1., 1., 0.]).all())

    def test_empty_data(self):
        with self.assertRaises(ValueError):
            training_matrices(self.schema, [])

    def test_schema_to_network_round_trip(self):
        schema = Schema(
            inputs=[ContinuousFeature('x', min=0, max=10)],
            outputs=[ContinuousOutput('y', min=0, max=10)])

        rs = np.random.RandomState(1234)
        data = [TrainingDatum({'x': x}, {'y': x / 10.})
                for x in rs.uniform(0, 10, size=20)]

        inputs, targets = training_matrices(schema, data)

        net = NeuralNetwork(
            schema.make_config(n_hidden=3, n_epochs=20, learning_rate=0.1),
            random_state=rs)
        net.train(inputs, targets)

        output = net.predict(schema.encode_input({'x': 5.0}))
        decision = schema.decode(output)

        self.assertEqual(list(decision), ['y'])
        self.assertTrue(0.0 < decision['y'] < 10.0)


if __name__ == '__main__':
    unittest.main()
