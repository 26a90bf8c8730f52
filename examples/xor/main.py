import logging

import matplotlib.pyplot as plt
import numpy as np

from ffnn import NeuralNetwork
from ffnn.data import xor
from ffnn.score_functions import accuracy, squared_error
from ffnn.util.logger import progress, setup_logging


logger = logging.getLogger('xor')

random_state = np.random.RandomState(1234)

n_epochs = 10000
log_every = 1000

setup_logging(filename='xor-log.txt', level=logging.INFO)

# Set up the network and fit it online ########################################

nnet = NeuralNetwork(
    input_size=2, hidden_size=4, output_size=1,
    learning_rate=0.5, random_state=random_state)

inputs, targets = xor.make()
loss_history = []

for epoch in range(n_epochs):
    for x, t in xor.make_stream(len(inputs), random_state=random_state):
        nnet.train(x, t)

    mse = np.mean([squared_error(nnet.compute_output(x), t)
                   for x, t in zip(inputs, targets)])
    loss_history.append(mse)

    if (epoch + 1) % log_every == 0:
        progress(logger, "mse = {:.5f}".format(mse), epoch + 1, n_epochs)

# Report ######################################################################

outputs = [nnet.compute_output(x) for x in inputs]

for x, output in zip(inputs, outputs):
    print("{} => {:.4f}".format(x, output[0]))

print("Accuracy: {:.2f}".format(accuracy(outputs, targets)))

plt.semilogy(np.arange(1, n_epochs + 1), loss_history)
plt.xlabel('Epoch')
plt.ylabel('Mean squared error')
plt.title('Online training on XOR')
plt.tight_layout()
plt.show()
