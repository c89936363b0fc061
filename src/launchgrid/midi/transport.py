"""MIDI transport for a single control surface."""

import logging
import queue
import threading
import time
from typing import Iterable, Optional

import mido

from launchgrid.devices.protocols import IncomingEvent, LedCommand
from launchgrid.exceptions import DevicePortNotFoundError, MidiBackendError

logger = logging.getLogger(__name__)


class MidiTransport:
    """
    Bidirectional connection to one MIDI device.

    Incoming messages are pushed by mido's I/O thread into an unbounded
    FIFO; the main loop drains it with `try_receive()`, which never
    blocks. Outgoing LED commands are fire-and-forget.

    Use `MidiTransport.connect()` to discover and open the ports.
    """

    def __init__(self, in_port_label: str = "", out_port_label: str = ""):
        """
        Create an unconnected transport.

        Args:
            in_port_label: Logical name of the input binding (for logging)
            out_port_label: Logical name of the output binding (for logging)
        """
        self._incoming: "queue.SimpleQueue[IncomingEvent]" = queue.SimpleQueue()
        self._input: Optional[mido.ports.BaseInput] = None
        self._output: Optional[mido.ports.BaseOutput] = None
        self.in_port_label = in_port_label
        self.out_port_label = out_port_label
        self._close_lock = threading.Lock()
        self._closed = False

    @classmethod
    def connect(
        cls,
        client_name: str,
        device_name: str,
        in_port_label: str,
        out_port_label: str,
    ) -> "MidiTransport":
        """
        Find the device by exact port name and open input and output.

        Args:
            client_name: Name this program registers with the MIDI subsystem
            device_name: Exact port name advertised by the device
            in_port_label: Logical label of the input binding
            out_port_label: Logical label of the output binding

        Returns:
            Connected transport

        Raises:
            MidiBackendError: If the MIDI subsystem cannot be initialized
            DevicePortNotFoundError: If no input or output port has that name
        """
        try:
            input_names = mido.get_input_names()
            output_names = mido.get_output_names()
        except Exception as e:
            raise MidiBackendError(str(e), device_name=device_name) from e

        logger.debug(f"Available MIDI inputs: {input_names}")
        logger.debug(f"Available MIDI outputs: {output_names}")

        if device_name not in input_names:
            raise DevicePortNotFoundError(device_name, "input")
        if device_name not in output_names:
            raise DevicePortNotFoundError(device_name, "output")

        transport = cls(in_port_label, out_port_label)
        try:
            transport._open(device_name, client_name)
        except Exception as e:
            transport.close()
            raise MidiBackendError(str(e), device_name=device_name) from e

        logger.info(
            f"Connected to {device_name} (in: {in_port_label}, out: {out_port_label})"
        )
        return transport

    def _open(self, device_name: str, client_name: str) -> None:
        """Open both ports; the input callback feeds the incoming queue."""
        self._input = mido.open_input(
            device_name, callback=self._on_message, client_name=client_name
        )
        self._output = mido.open_output(device_name, client_name=client_name)

    @staticmethod
    def list_ports() -> dict:
        """
        List all available MIDI ports.

        Returns:
            Dictionary with 'input' and 'output' lists of port names

        Raises:
            MidiBackendError: If the MIDI subsystem cannot be initialized
        """
        try:
            return {
                'input': mido.get_input_names(),
                'output': mido.get_output_names()
            }
        except Exception as e:
            raise MidiBackendError(str(e)) from e

    def _on_message(self, msg: mido.Message) -> None:
        """
        Input callback - called from mido's internal I/O thread.

        Only copies the payload into the queue; never touches app state.
        """
        data = msg.bytes()
        if len(data) != 3:
            # SysEx, clock and other non 3-byte traffic is not button input
            return
        self._incoming.put(IncomingEvent.from_bytes(data, time.monotonic()))

    def try_receive(self) -> Optional[IncomingEvent]:
        """
        Take the oldest pending message without blocking.

        Returns:
            IncomingEvent, or None if nothing is pending
        """
        try:
            return self._incoming.get_nowait()
        except queue.Empty:
            return None

    def send(self, command: LedCommand) -> bool:
        """
        Send an LED command.

        Failures are logged and swallowed; the next render pass re-sends
        the full state anyway.

        Returns:
            True if handed to the backend, False otherwise
        """
        if self.is_closed or self._output is None:
            return False
        try:
            self._output.send(command.to_message())
            return True
        except Exception as e:
            logger.debug(f"Dropped LED command {command}: {e}")
            return False

    def send_all(self, commands: Iterable[LedCommand]) -> int:
        """
        Send a batch of LED commands.

        Returns:
            Number of commands handed to the backend
        """
        return sum(1 for command in commands if self.send(command))

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release both ports. Safe to call more than once."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

            for port in (self._input, self._output):
                if port is None:
                    continue
                try:
                    port.close()
                except Exception as e:
                    logger.error(f"Error closing MIDI port {port.name}: {e}")

        logger.debug("MidiTransport closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
